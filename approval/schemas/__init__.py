"""Pydantic schemas package."""

from .company import CompanyCreate, CompanyRead, CompanyUpdate
from .meeting import MeetingCreate, MeetingRead, MeetingUpdate
from .participant import (
    MeetingParticipantCreate,
    MeetingParticipantPresenceUpdate,
    MeetingParticipantRead,
    ParticipantCreate,
    ParticipantRead,
    ParticipantUpdate,
)
from .topic import TopicCreate, TopicRead, TopicUpdate
from .voting import BallotSubmission, VoteSubmissionRequest, VoterRead, VoterUpdate, VotingRead

__all__ = [
    "BallotSubmission",
    "CompanyCreate",
    "CompanyRead",
    "CompanyUpdate",
    "MeetingCreate",
    "MeetingParticipantCreate",
    "MeetingParticipantPresenceUpdate",
    "MeetingParticipantRead",
    "MeetingRead",
    "MeetingUpdate",
    "ParticipantCreate",
    "ParticipantRead",
    "ParticipantUpdate",
    "TopicCreate",
    "TopicRead",
    "TopicUpdate",
    "VoteSubmissionRequest",
    "VoterRead",
    "VoterUpdate",
    "VotingRead",
]
