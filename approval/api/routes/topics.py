"""Agenda topic endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from approval.api.deps import get_db_session
from approval.schemas.topic import TopicCreate, TopicRead, TopicUpdate
from approval.services import topics as topic_service

router = APIRouter()


@router.post("", response_model=TopicRead, status_code=status.HTTP_201_CREATED)
def create_topic(
    company_id: str,
    meeting_id: str,
    payload: TopicCreate,
    session: Session = Depends(get_db_session),
) -> TopicRead:
    topic = topic_service.create_topic(
        session, company_id=company_id, meeting_id=meeting_id, title=payload.title
    )
    session.commit()
    session.refresh(topic)
    return TopicRead.model_validate(topic)


@router.get("", response_model=list[TopicRead])
def list_topics(
    company_id: str,
    meeting_id: str,
    q: str | None = Query(default=None, description="Case-insensitive title search."),
    session: Session = Depends(get_db_session),
) -> list[TopicRead]:
    results = topic_service.list_topics(
        session, company_id=company_id, meeting_id=meeting_id, query=q
    )
    return [TopicRead.model_validate(item) for item in results]


@router.get("/{topic_id}", response_model=TopicRead)
def get_topic(
    company_id: str,
    meeting_id: str,
    topic_id: str,
    session: Session = Depends(get_db_session),
) -> TopicRead:
    topic = topic_service.get_topic(
        session, company_id=company_id, meeting_id=meeting_id, topic_id=topic_id
    )
    return TopicRead.model_validate(topic)


@router.put("/{topic_id}", response_model=TopicRead)
def update_topic(
    company_id: str,
    meeting_id: str,
    topic_id: str,
    payload: TopicUpdate,
    session: Session = Depends(get_db_session),
) -> TopicRead:
    topic = topic_service.update_topic(
        session,
        company_id=company_id,
        meeting_id=meeting_id,
        topic_id=topic_id,
        title=payload.title,
    )
    session.commit()
    session.refresh(topic)
    return TopicRead.model_validate(topic)


@router.delete("/{topic_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_topic(
    company_id: str,
    meeting_id: str,
    topic_id: str,
    session: Session = Depends(get_db_session),
) -> None:
    topic_service.delete_topic(
        session, company_id=company_id, meeting_id=meeting_id, topic_id=topic_id
    )
    session.commit()
