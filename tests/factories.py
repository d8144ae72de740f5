"""Builders for the records most tests need."""
from __future__ import annotations

import datetime
from itertools import count

from sqlalchemy.orm import Session

from approval.models import (
    Company,
    CompanyType,
    Meeting,
    MeetingParticipant,
    MeetingType,
    Participant,
    ParticipantType,
    Topic,
)
from approval.services.companies import create_company
from approval.services.meeting_participants import RosterAddition, add_meeting_participants
from approval.services.meetings import create_meeting
from approval.services.participants import create_participant
from approval.services.topics import create_topic

_inn_sequence = count(7700000001)


def make_company(session: Session, *, title: str = "АО Ромашка") -> Company:
    return create_company(
        session,
        title=title,
        inn=next(_inn_sequence),
        company_type=CompanyType.JSC,
        has_board_of_directors=True,
    )


def make_participant(
    session: Session,
    company: Company,
    name: str,
    *,
    share: float = 0.0,
    type: ParticipantType = ParticipantType.OWNER,
    is_active: bool = True,
) -> Participant:
    return create_participant(
        session, company_id=company.id, name=name, share=share, type=type, is_active=is_active
    )


def make_meeting(
    session: Session, company: Company, *, type: MeetingType = MeetingType.FMS
) -> Meeting:
    return create_meeting(
        session,
        company_id=company.id,
        type=type,
        date=datetime.date(2024, 10, 15),
        address="Москва, ул. Ленина, 1",
    )


def seat(
    session: Session, meeting: Meeting, *participants: Participant
) -> list[MeetingParticipant]:
    return add_meeting_participants(
        session,
        company_id=meeting.company_id,
        meeting_id=meeting.id,
        additions=[RosterAddition(participant_id=item.id) for item in participants],
    )


def make_topic(session: Session, meeting: Meeting, title: str = "Утверждение отчёта") -> Topic:
    return create_topic(session, company_id=meeting.company_id, meeting_id=meeting.id, title=title)
