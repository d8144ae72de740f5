"""Meeting endpoints scoped to a company."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from approval.api.deps import get_db_session
from approval.schemas.meeting import MeetingCreate, MeetingRead, MeetingUpdate
from approval.services import meetings as meeting_service

router = APIRouter()


@router.post("", response_model=MeetingRead, status_code=status.HTTP_201_CREATED)
def create_meeting(
    company_id: str,
    payload: MeetingCreate,
    session: Session = Depends(get_db_session),
) -> MeetingRead:
    meeting = meeting_service.create_meeting(session, company_id=company_id, **payload.model_dump())
    session.commit()
    session.refresh(meeting)
    return MeetingRead.model_validate(meeting)


@router.get("", response_model=list[MeetingRead])
def list_meetings(company_id: str, session: Session = Depends(get_db_session)) -> list[MeetingRead]:
    results = meeting_service.list_meetings(session, company_id=company_id)
    return [MeetingRead.model_validate(item) for item in results]


@router.get("/{meeting_id}", response_model=MeetingRead)
def get_meeting(
    company_id: str,
    meeting_id: str,
    session: Session = Depends(get_db_session),
) -> MeetingRead:
    meeting = meeting_service.verify_company_and_meeting(session, company_id, meeting_id)
    return MeetingRead.model_validate(meeting)


@router.put("/{meeting_id}", response_model=MeetingRead)
def update_meeting(
    company_id: str,
    meeting_id: str,
    payload: MeetingUpdate,
    session: Session = Depends(get_db_session),
) -> MeetingRead:
    meeting = meeting_service.update_meeting(
        session,
        company_id=company_id,
        meeting_id=meeting_id,
        changes=payload.model_dump(exclude_unset=True),
    )
    session.commit()
    session.refresh(meeting)
    return MeetingRead.model_validate(meeting)


@router.delete("/{meeting_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_meeting(
    company_id: str,
    meeting_id: str,
    session: Session = Depends(get_db_session),
) -> None:
    meeting_service.delete_meeting(session, company_id=company_id, meeting_id=meeting_id)
    session.commit()
