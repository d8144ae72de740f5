"""Exception hierarchy shared by models, services and the HTTP layer."""
from __future__ import annotations


class ApprovalError(RuntimeError):
    """Base exception for approval service errors."""


class NotFoundError(ApprovalError):
    """Raised when a referenced record does not exist."""

    entity = "Record"

    def __init__(self, identifier: object) -> None:
        super().__init__(f"{self.entity} '{identifier}' not found")
        self.identifier = identifier


class CompanyNotFoundError(NotFoundError):
    entity = "Company"


class ParticipantNotFoundError(NotFoundError):
    entity = "Participant"


class MeetingNotFoundError(NotFoundError):
    entity = "Meeting"


class MeetingParticipantNotFoundError(NotFoundError):
    entity = "Meeting participant"


class TopicNotFoundError(NotFoundError):
    entity = "Topic"


class VotingNotFoundError(NotFoundError):
    """Raised when no voting session exists for a topic."""

    entity = "Voting for topic"


class VoterNotFoundError(NotFoundError):
    entity = "Voter"


class InvalidEnumValueError(ApprovalError, ValueError):
    """Raised when a string does not match any label of an enumeration."""

    def __init__(self, enum_name: str, value: object) -> None:
        super().__init__(f"{enum_name} '{value}' not found")
        self.enum_name = enum_name
        self.value = value


class InvalidArgumentError(ApprovalError, ValueError):
    """Raised when a required argument is missing at a service boundary."""


class AlreadyExistsError(ApprovalError):
    """Raised when a record collides with an existing one."""


class CompanyAlreadyExistsError(AlreadyExistsError):
    pass


class ParticipantAlreadyExistsError(AlreadyExistsError):
    pass


class MeetingParticipantAlreadyExistsError(AlreadyExistsError):
    pass


class ParticipantNotEligibleError(ApprovalError):
    """Raised when a participant may not join a meeting roster."""


def require(value: object, name: str) -> None:
    """Raise :class:`InvalidArgumentError` if ``value`` is ``None``."""

    if value is None:
        raise InvalidArgumentError(f"{name} must not be null")


__all__ = [
    "AlreadyExistsError",
    "ApprovalError",
    "CompanyAlreadyExistsError",
    "CompanyNotFoundError",
    "InvalidArgumentError",
    "InvalidEnumValueError",
    "MeetingNotFoundError",
    "MeetingParticipantAlreadyExistsError",
    "MeetingParticipantNotFoundError",
    "NotFoundError",
    "ParticipantAlreadyExistsError",
    "ParticipantNotEligibleError",
    "ParticipantNotFoundError",
    "TopicNotFoundError",
    "VoterNotFoundError",
    "VotingNotFoundError",
    "require",
]
