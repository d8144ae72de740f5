"""Meeting roster endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from approval.api.deps import get_db_session
from approval.schemas.participant import (
    MeetingParticipantCreate,
    MeetingParticipantPresenceUpdate,
    MeetingParticipantRead,
    ParticipantRead,
)
from approval.services import meeting_participants as roster_service

router = APIRouter()


@router.post("", response_model=list[MeetingParticipantRead], status_code=status.HTTP_201_CREATED)
def add_meeting_participants(
    company_id: str,
    meeting_id: str,
    payload: list[MeetingParticipantCreate],
    session: Session = Depends(get_db_session),
) -> list[MeetingParticipantRead]:
    additions = [
        roster_service.RosterAddition(participant_id=item.participant_id, is_present=item.is_present)
        for item in payload
    ]
    entries = roster_service.add_meeting_participants(
        session, company_id=company_id, meeting_id=meeting_id, additions=additions
    )
    session.commit()
    return [MeetingParticipantRead.model_validate(entry) for entry in entries]


@router.get("", response_model=list[MeetingParticipantRead])
def list_meeting_participants(
    company_id: str,
    meeting_id: str,
    session: Session = Depends(get_db_session),
) -> list[MeetingParticipantRead]:
    entries = roster_service.list_meeting_participants(
        session, company_id=company_id, meeting_id=meeting_id
    )
    return [MeetingParticipantRead.model_validate(entry) for entry in entries]


@router.get("/potentials", response_model=list[ParticipantRead])
def list_potential_participants(
    company_id: str,
    meeting_id: str,
    session: Session = Depends(get_db_session),
) -> list[ParticipantRead]:
    """Participants that may still be added to the roster."""
    results = roster_service.list_potential_participants(
        session, company_id=company_id, meeting_id=meeting_id
    )
    return [ParticipantRead.model_validate(item) for item in results]


@router.get("/{participant_id}", response_model=MeetingParticipantRead)
def get_meeting_participant(
    company_id: str,
    meeting_id: str,
    participant_id: str,
    session: Session = Depends(get_db_session),
) -> MeetingParticipantRead:
    entry = roster_service.get_meeting_participant(
        session, company_id=company_id, meeting_id=meeting_id, participant_id=participant_id
    )
    return MeetingParticipantRead.model_validate(entry)


@router.patch("/{participant_id}", response_model=MeetingParticipantRead)
def update_presence(
    company_id: str,
    meeting_id: str,
    participant_id: str,
    payload: MeetingParticipantPresenceUpdate,
    session: Session = Depends(get_db_session),
) -> MeetingParticipantRead:
    entry = roster_service.set_presence(
        session,
        company_id=company_id,
        meeting_id=meeting_id,
        participant_id=participant_id,
        is_present=payload.is_present,
    )
    session.commit()
    session.refresh(entry)
    return MeetingParticipantRead.model_validate(entry)


@router.delete("/{participant_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_meeting_participant(
    company_id: str,
    meeting_id: str,
    participant_id: str,
    session: Session = Depends(get_db_session),
) -> None:
    roster_service.remove_meeting_participant(
        session, company_id=company_id, meeting_id=meeting_id, participant_id=participant_id
    )
    session.commit()
