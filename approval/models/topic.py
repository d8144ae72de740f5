"""Agenda topic ORM model."""
from __future__ import annotations

from sqlalchemy import ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from approval.models.base import Base, IdentifierMixin, TimestampMixin


class Topic(IdentifierMixin, TimestampMixin, Base):
    """Agenda item of a meeting; decided by exactly one voting."""

    __tablename__ = "topics"
    __table_args__ = (Index("ix_topics_meeting_id", "meeting_id"),)

    meeting_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("meetings.id", ondelete="CASCADE"), nullable=False
    )
    title: Mapped[str] = mapped_column(String(1024), nullable=False)

    meeting = relationship("Meeting", back_populates="topics")
    voting = relationship(
        "Voting", back_populates="topic", uselist=False, cascade="all, delete-orphan"
    )


__all__ = ["Topic"]
