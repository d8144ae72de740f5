"""Meeting registry scoped to a company."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from approval.core.exceptions import MeetingNotFoundError, require
from approval.models import Meeting, MeetingParticipant, MeetingType
from approval.services.companies import get_company
from approval.services.participants import get_participant

logger = logging.getLogger(__name__)

_OFFICER_FIELDS = ("chairman_id", "secretary_id")


def verify_company_and_meeting(session: Session, company_id: str, meeting_id: str) -> Meeting:
    """Return the meeting after checking both records exist and belong together."""

    get_company(session, company_id)
    require(meeting_id, "Meeting ID")
    meeting = session.get(Meeting, meeting_id)
    if meeting is None or meeting.company_id != company_id:
        raise MeetingNotFoundError(meeting_id)
    return meeting


def list_roster_entries(session: Session, meeting_id: str) -> list[MeetingParticipant]:
    """Return the meeting roster in the order participants joined it."""

    require(meeting_id, "Meeting ID")
    statement = (
        select(MeetingParticipant)
        .where(MeetingParticipant.meeting_id == meeting_id)
        .order_by(MeetingParticipant.created_at, MeetingParticipant.id)
    )
    return list(session.scalars(statement).all())


def _check_officers(session: Session, company_id: str, values: Mapping[str, Any]) -> None:
    for field_name in _OFFICER_FIELDS:
        participant_id = values.get(field_name)
        if participant_id is not None:
            get_participant(session, company_id=company_id, participant_id=participant_id)


def create_meeting(
    session: Session,
    *,
    company_id: str,
    type: MeetingType,
    date: date,
    address: str,
    chairman_id: str | None = None,
    secretary_id: str | None = None,
) -> Meeting:
    company = get_company(session, company_id)
    _check_officers(
        session, company_id, {"chairman_id": chairman_id, "secretary_id": secretary_id}
    )
    meeting = Meeting(
        company=company,
        type=type,
        date=date,
        address=address,
        chairman_id=chairman_id,
        secretary_id=secretary_id,
    )
    session.add(meeting)
    session.flush()
    logger.info("Scheduled %s meeting %s for company %s", type.value, meeting.id, company_id)
    return meeting


def list_meetings(session: Session, *, company_id: str) -> list[Meeting]:
    get_company(session, company_id)
    statement = (
        select(Meeting)
        .where(Meeting.company_id == company_id)
        .order_by(Meeting.date.desc(), Meeting.created_at)
    )
    return list(session.scalars(statement).all())


def update_meeting(
    session: Session, *, company_id: str, meeting_id: str, changes: Mapping[str, Any]
) -> Meeting:
    meeting = verify_company_and_meeting(session, company_id, meeting_id)
    _check_officers(session, company_id, changes)
    for field_name, value in changes.items():
        setattr(meeting, field_name, value)
    session.flush()
    return meeting


def delete_meeting(session: Session, *, company_id: str, meeting_id: str) -> None:
    meeting = verify_company_and_meeting(session, company_id, meeting_id)
    session.delete(meeting)
    session.flush()
    logger.info("Deleted meeting %s of company %s", meeting_id, company_id)


__all__ = [
    "create_meeting",
    "delete_meeting",
    "list_meetings",
    "list_roster_entries",
    "update_meeting",
    "verify_company_and_meeting",
]
