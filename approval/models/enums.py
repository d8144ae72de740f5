"""Enumerations with their external display labels.

Each enum is persisted by member name. ``label`` is the string clients see and
``from_label`` resolves it back through a literal lookup table.
"""
from __future__ import annotations

import enum

from approval.core.exceptions import InvalidEnumValueError


class CompanyType(str, enum.Enum):
    JSC = "JSC"
    LLC = "LLC"

    @property
    def label(self) -> str:
        return _COMPANY_TYPE_LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> CompanyType:
        try:
            return _COMPANY_TYPES_BY_LABEL[label]
        except (KeyError, TypeError):
            raise InvalidEnumValueError("Company type", label) from None


class ParticipantType(str, enum.Enum):
    OWNER = "OWNER"
    MEMBER_OF_BOARD = "MEMBER_OF_BOARD"

    @property
    def label(self) -> str:
        return _PARTICIPANT_TYPE_LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> ParticipantType:
        try:
            return _PARTICIPANT_TYPES_BY_LABEL[label]
        except (KeyError, TypeError):
            raise InvalidEnumValueError("Participant type", label) from None


class MeetingType(str, enum.Enum):
    """Board of directors meeting, or a general meeting of participants/shareholders."""

    BOD = "BOD"
    FMP = "FMP"
    FMS = "FMS"

    @property
    def label(self) -> str:
        return _MEETING_TYPE_LABELS[self]

    @property
    def eligible_participant_type(self) -> ParticipantType:
        """Participant type allowed on the roster of a meeting of this type."""
        if self is MeetingType.BOD:
            return ParticipantType.MEMBER_OF_BOARD
        return ParticipantType.OWNER

    @classmethod
    def from_label(cls, label: str) -> MeetingType:
        try:
            return _MEETING_TYPES_BY_LABEL[label]
        except (KeyError, TypeError):
            raise InvalidEnumValueError("Meeting type", label) from None


class VoteType(str, enum.Enum):
    NOT_VOTED = "NOT_VOTED"
    YES = "YES"
    NO = "NO"
    ABSTAINED = "ABSTAINED"

    @property
    def label(self) -> str:
        return _VOTE_TYPE_LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> VoteType:
        try:
            return _VOTE_TYPES_BY_LABEL[label]
        except (KeyError, TypeError):
            raise InvalidEnumValueError("Vote type", label) from None


_COMPANY_TYPE_LABELS: dict[CompanyType, str] = {
    CompanyType.JSC: "Акционерное общество",
    CompanyType.LLC: "Общество с ограниченной ответственностью",
}
_PARTICIPANT_TYPE_LABELS: dict[ParticipantType, str] = {
    ParticipantType.OWNER: "Собственник",
    ParticipantType.MEMBER_OF_BOARD: "Член совета директоров",
}
_MEETING_TYPE_LABELS: dict[MeetingType, str] = {
    MeetingType.BOD: "Совет директоров",
    MeetingType.FMP: "Общее собрание участников",
    MeetingType.FMS: "Общее собрание акционеров",
}
_VOTE_TYPE_LABELS: dict[VoteType, str] = {
    VoteType.NOT_VOTED: "НЕ ГОЛОСОВАЛ",
    VoteType.YES: "ЗА",
    VoteType.NO: "ПРОТИВ",
    VoteType.ABSTAINED: "ВОЗДЕРЖАЛСЯ",
}

_COMPANY_TYPES_BY_LABEL = {label: member for member, label in _COMPANY_TYPE_LABELS.items()}
_PARTICIPANT_TYPES_BY_LABEL = {label: member for member, label in _PARTICIPANT_TYPE_LABELS.items()}
_MEETING_TYPES_BY_LABEL = {label: member for member, label in _MEETING_TYPE_LABELS.items()}
_VOTE_TYPES_BY_LABEL = {label: member for member, label in _VOTE_TYPE_LABELS.items()}


def resolve_enum(enum_cls, value):
    """Return the member of ``enum_cls`` named or labelled by ``value``."""

    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str) and value in enum_cls.__members__:
        return enum_cls[value]
    return enum_cls.from_label(value)


__all__ = ["CompanyType", "MeetingType", "ParticipantType", "VoteType", "resolve_enum"]
