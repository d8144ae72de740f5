"""ORM models package."""
from .base import Base, IdentifierMixin, TimestampMixin
from .company import Company
from .enums import CompanyType, MeetingType, ParticipantType, VoteType
from .meeting import Meeting
from .participant import MeetingParticipant, Participant
from .topic import Topic
from .voting import Voter, Voting

__all__ = [
    "Base",
    "Company",
    "CompanyType",
    "IdentifierMixin",
    "Meeting",
    "MeetingParticipant",
    "MeetingType",
    "Participant",
    "ParticipantType",
    "TimestampMixin",
    "Topic",
    "VoteType",
    "Voter",
    "Voting",
]
