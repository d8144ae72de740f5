"""Participant directory scoped to a company."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from approval.core.exceptions import (
    ParticipantAlreadyExistsError,
    ParticipantNotFoundError,
    require,
)
from approval.models import MeetingParticipant, Participant, ParticipantType
from approval.services.companies import get_company

logger = logging.getLogger(__name__)


def _flush_or_conflict(session: Session, *, name: str, type: ParticipantType) -> None:
    try:
        session.flush()
    except IntegrityError as exc:
        session.rollback()
        raise ParticipantAlreadyExistsError(
            f"Participant '{name}' of type {type.value} already exists"
        ) from exc


def get_participant(session: Session, *, company_id: str, participant_id: str) -> Participant:
    require(participant_id, "Participant ID")
    participant = session.get(Participant, participant_id)
    if participant is None or participant.company_id != company_id:
        raise ParticipantNotFoundError(participant_id)
    return participant


def create_participant(
    session: Session,
    *,
    company_id: str,
    name: str,
    share: float,
    type: ParticipantType,
    is_active: bool = True,
) -> Participant:
    company = get_company(session, company_id)
    participant = Participant(
        company=company,
        name=name,
        share=share,
        type=type,
        is_active=is_active,
    )
    session.add(participant)
    _flush_or_conflict(session, name=name, type=type)
    logger.info("Registered participant %s for company %s", participant.id, company_id)
    return participant


def list_participants(
    session: Session, *, company_id: str, query: str | None = None
) -> list[Participant]:
    get_company(session, company_id)
    statement = (
        select(Participant).where(Participant.company_id == company_id).order_by(Participant.name)
    )
    if query is not None and query.strip():
        statement = statement.where(func.lower(Participant.name).contains(query.strip().lower()))
    return list(session.scalars(statement).all())


def update_participant(
    session: Session, *, company_id: str, participant_id: str, changes: Mapping[str, Any]
) -> Participant:
    participant = get_participant(session, company_id=company_id, participant_id=participant_id)
    for field_name, value in changes.items():
        setattr(participant, field_name, value)
    _flush_or_conflict(session, name=participant.name, type=participant.type)
    return participant


def delete_participant(session: Session, *, company_id: str, participant_id: str) -> None:
    """Remove a participant from the company directory.

    A participant that sits on any meeting roster is deactivated instead, so
    its voters and the outcomes they produced stay intact.
    """

    participant = get_participant(session, company_id=company_id, participant_id=participant_id)
    seated = session.scalars(
        select(MeetingParticipant.id)
        .where(MeetingParticipant.participant_id == participant.id)
        .limit(1)
    ).first()
    if seated is not None:
        participant.is_active = False
        session.flush()
        logger.info(
            "Deactivated participant %s of company %s: it is on a meeting roster",
            participant_id,
            company_id,
        )
        return

    session.delete(participant)
    session.flush()
    logger.info("Deleted participant %s of company %s", participant_id, company_id)


__all__ = [
    "create_participant",
    "delete_participant",
    "get_participant",
    "list_participants",
    "update_participant",
]
