"""Agenda topics of a meeting."""
from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from approval.core.exceptions import TopicNotFoundError, require
from approval.models import Topic
from approval.services.meetings import verify_company_and_meeting
from approval.services.voting import create_voting_for_topic

logger = logging.getLogger(__name__)


def get_topic(session: Session, *, company_id: str, meeting_id: str, topic_id: str) -> Topic:
    meeting = verify_company_and_meeting(session, company_id, meeting_id)
    require(topic_id, "Topic ID")
    topic = session.get(Topic, topic_id)
    if topic is None or topic.meeting_id != meeting.id:
        raise TopicNotFoundError(topic_id)
    return topic


def create_topic(session: Session, *, company_id: str, meeting_id: str, title: str) -> Topic:
    """Add a topic to the agenda and open its voting for everyone on the roster."""

    meeting = verify_company_and_meeting(session, company_id, meeting_id)
    topic = Topic(meeting=meeting, title=title)
    session.add(topic)
    session.flush()
    create_voting_for_topic(session, topic.id)
    logger.info("Added topic %s to meeting %s", topic.id, meeting.id)
    return topic


def list_topics(
    session: Session, *, company_id: str, meeting_id: str, query: str | None = None
) -> list[Topic]:
    meeting = verify_company_and_meeting(session, company_id, meeting_id)
    statement = select(Topic).where(Topic.meeting_id == meeting.id).order_by(Topic.title)
    if query is not None and query.strip():
        statement = statement.where(func.lower(Topic.title).contains(query.strip().lower()))
    return list(session.scalars(statement).all())


def update_topic(
    session: Session, *, company_id: str, meeting_id: str, topic_id: str, title: str
) -> Topic:
    topic = get_topic(session, company_id=company_id, meeting_id=meeting_id, topic_id=topic_id)
    topic.title = title
    session.flush()
    return topic


def delete_topic(session: Session, *, company_id: str, meeting_id: str, topic_id: str) -> None:
    topic = get_topic(session, company_id=company_id, meeting_id=meeting_id, topic_id=topic_id)
    session.delete(topic)
    session.flush()
    logger.info("Deleted topic %s of meeting %s", topic_id, meeting_id)


__all__ = [
    "create_topic",
    "delete_topic",
    "get_topic",
    "list_topics",
    "update_topic",
]
