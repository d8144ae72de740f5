from __future__ import annotations

import pytest

from approval.core.exceptions import InvalidEnumValueError
from approval.models import CompanyType, MeetingType, ParticipantType, VoteType
from approval.models.enums import resolve_enum


def test_vote_type_has_four_members() -> None:
    assert [member.name for member in VoteType] == ["NOT_VOTED", "YES", "NO", "ABSTAINED"]


@pytest.mark.parametrize("vote", list(VoteType))
def test_label_round_trip(vote: VoteType) -> None:
    assert VoteType.from_label(vote.label) is vote


def test_vote_labels() -> None:
    assert VoteType.YES.label == "ЗА"
    assert VoteType.NO.label == "ПРОТИВ"
    assert VoteType.ABSTAINED.label == "ВОЗДЕРЖАЛСЯ"
    assert VoteType.NOT_VOTED.label == "НЕ ГОЛОСОВАЛ"


@pytest.mark.parametrize("label", ["MAYBE", "YES", "за", "", None])
def test_unknown_vote_label(label: object) -> None:
    with pytest.raises(InvalidEnumValueError) as excinfo:
        VoteType.from_label(label)  # type: ignore[arg-type]

    assert excinfo.value.value == label
    assert isinstance(excinfo.value, ValueError)


def test_meeting_type_eligibility() -> None:
    assert MeetingType.BOD.eligible_participant_type is ParticipantType.MEMBER_OF_BOARD
    assert MeetingType.FMS.eligible_participant_type is ParticipantType.OWNER
    assert MeetingType.FMP.eligible_participant_type is ParticipantType.OWNER


@pytest.mark.parametrize(
    ("enum_cls", "value", "expected"),
    [
        (CompanyType, "LLC", CompanyType.LLC),
        (CompanyType, "Акционерное общество", CompanyType.JSC),
        (ParticipantType, "Собственник", ParticipantType.OWNER),
        (MeetingType, MeetingType.BOD, MeetingType.BOD),
        (MeetingType, "Общее собрание участников", MeetingType.FMP),
    ],
)
def test_resolve_enum_accepts_code_or_label(enum_cls, value, expected) -> None:  # type: ignore[no-untyped-def]
    assert resolve_enum(enum_cls, value) is expected


def test_resolve_enum_rejects_unknown_value() -> None:
    with pytest.raises(InvalidEnumValueError):
        resolve_enum(MeetingType, "AGM")
