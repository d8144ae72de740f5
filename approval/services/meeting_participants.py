"""Meeting roster management: who attends a meeting and who is present."""
from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.orm import Session

from approval.core.exceptions import (
    MeetingParticipantAlreadyExistsError,
    MeetingParticipantNotFoundError,
    ParticipantNotEligibleError,
    require,
)
from approval.models import Meeting, MeetingParticipant, Participant
from approval.services.meetings import list_roster_entries, verify_company_and_meeting
from approval.services.participants import get_participant
from approval.services.voting import extend_votings_for_meeting

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RosterAddition:
    participant_id: str
    is_present: bool = False


def _check_eligible(meeting: Meeting, participant: Participant) -> None:
    if not participant.is_active:
        raise ParticipantNotEligibleError(f"Participant '{participant.id}' is not active")
    expected = meeting.type.eligible_participant_type
    if participant.type is not expected:
        raise ParticipantNotEligibleError(
            f"Participant '{participant.id}' of type {participant.type.value} "
            f"cannot attend a {meeting.type.value} meeting"
        )


def add_meeting_participants(
    session: Session,
    *,
    company_id: str,
    meeting_id: str,
    additions: Sequence[RosterAddition],
) -> list[MeetingParticipant]:
    """Put participants on the meeting roster and give them a vote on every topic.

    Every participant must belong to the company, be active and have the type
    the meeting type admits. A participant already on the roster, or listed
    twice, is a conflict.
    """

    require(additions, "Participants")
    meeting = verify_company_and_meeting(session, company_id, meeting_id)
    on_roster = {entry.participant_id for entry in list_roster_entries(session, meeting.id)}

    entries: list[MeetingParticipant] = []
    for addition in additions:
        participant = get_participant(
            session, company_id=company_id, participant_id=addition.participant_id
        )
        _check_eligible(meeting, participant)
        if participant.id in on_roster:
            raise MeetingParticipantAlreadyExistsError(
                f"Participant '{participant.id}' is already on the roster of meeting '{meeting.id}'"
            )
        entry = MeetingParticipant(
            meeting=meeting, participant=participant, is_present=addition.is_present
        )
        session.add(entry)
        on_roster.add(participant.id)
        entries.append(entry)

    session.flush()
    logger.info("Added %d participant(s) to meeting %s", len(entries), meeting.id)
    extend_votings_for_meeting(session, meeting.id)
    return entries


def list_meeting_participants(
    session: Session, *, company_id: str, meeting_id: str
) -> list[MeetingParticipant]:
    meeting = verify_company_and_meeting(session, company_id, meeting_id)
    return list_roster_entries(session, meeting.id)


def list_potential_participants(
    session: Session, *, company_id: str, meeting_id: str
) -> list[Participant]:
    """Return active participants that could still join the meeting roster."""

    meeting = verify_company_and_meeting(session, company_id, meeting_id)
    on_roster = select(MeetingParticipant.participant_id).where(
        MeetingParticipant.meeting_id == meeting.id
    )
    statement = (
        select(Participant)
        .where(
            Participant.company_id == company_id,
            Participant.is_active.is_(True),
            Participant.type == meeting.type.eligible_participant_type,
            Participant.id.not_in(on_roster),
        )
        .order_by(Participant.name)
    )
    return list(session.scalars(statement).all())


def get_meeting_participant(
    session: Session, *, company_id: str, meeting_id: str, participant_id: str
) -> MeetingParticipant:
    """Return the roster entry of ``participant_id`` in the meeting."""

    meeting = verify_company_and_meeting(session, company_id, meeting_id)
    require(participant_id, "Participant ID")
    statement = select(MeetingParticipant).where(
        MeetingParticipant.meeting_id == meeting.id,
        MeetingParticipant.participant_id == participant_id,
    )
    entry = session.scalars(statement).one_or_none()
    if entry is None:
        raise MeetingParticipantNotFoundError(participant_id)
    return entry


def set_presence(
    session: Session, *, company_id: str, meeting_id: str, participant_id: str, is_present: bool
) -> MeetingParticipant:
    entry = get_meeting_participant(
        session, company_id=company_id, meeting_id=meeting_id, participant_id=participant_id
    )
    entry.is_present = is_present
    session.flush()
    return entry


def remove_meeting_participant(
    session: Session, *, company_id: str, meeting_id: str, participant_id: str
) -> None:
    """Take the participant off the roster; its voters on every topic go with it."""

    entry = get_meeting_participant(
        session, company_id=company_id, meeting_id=meeting_id, participant_id=participant_id
    )
    session.delete(entry)
    session.flush()
    logger.info("Removed participant %s from meeting %s", participant_id, meeting_id)


__all__ = [
    "RosterAddition",
    "add_meeting_participants",
    "get_meeting_participant",
    "list_meeting_participants",
    "list_potential_participants",
    "remove_meeting_participant",
    "set_presence",
]
