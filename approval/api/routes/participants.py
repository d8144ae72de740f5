"""Participant endpoints scoped to a company."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from approval.api.deps import get_db_session
from approval.schemas.participant import ParticipantCreate, ParticipantRead, ParticipantUpdate
from approval.services import participants as participant_service

router = APIRouter()


@router.post("", response_model=ParticipantRead, status_code=status.HTTP_201_CREATED)
def create_participant(
    company_id: str,
    payload: ParticipantCreate,
    session: Session = Depends(get_db_session),
) -> ParticipantRead:
    participant = participant_service.create_participant(
        session,
        company_id=company_id,
        name=payload.name,
        share=payload.share,
        type=payload.type,
        is_active=payload.is_active,
    )
    session.commit()
    session.refresh(participant)
    return ParticipantRead.model_validate(participant)


@router.get("", response_model=list[ParticipantRead])
def list_participants(
    company_id: str,
    q: str | None = Query(default=None, description="Case-insensitive name search."),
    session: Session = Depends(get_db_session),
) -> list[ParticipantRead]:
    results = participant_service.list_participants(session, company_id=company_id, query=q)
    return [ParticipantRead.model_validate(item) for item in results]


@router.get("/{participant_id}", response_model=ParticipantRead)
def get_participant(
    company_id: str,
    participant_id: str,
    session: Session = Depends(get_db_session),
) -> ParticipantRead:
    participant = participant_service.get_participant(
        session, company_id=company_id, participant_id=participant_id
    )
    return ParticipantRead.model_validate(participant)


@router.put("/{participant_id}", response_model=ParticipantRead)
def update_participant(
    company_id: str,
    participant_id: str,
    payload: ParticipantUpdate,
    session: Session = Depends(get_db_session),
) -> ParticipantRead:
    participant = participant_service.update_participant(
        session,
        company_id=company_id,
        participant_id=participant_id,
        changes=payload.model_dump(exclude_unset=True),
    )
    session.commit()
    session.refresh(participant)
    return ParticipantRead.model_validate(participant)


@router.delete("/{participant_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_participant(
    company_id: str,
    participant_id: str,
    session: Session = Depends(get_db_session),
) -> None:
    participant_service.delete_participant(
        session, company_id=company_id, participant_id=participant_id
    )
    session.commit()
