"""Meeting ORM model."""
from __future__ import annotations

import datetime

from sqlalchemy import Date, ForeignKey, Index, String
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from approval.models.base import Base, IdentifierMixin, TimestampMixin
from approval.models.enums import MeetingType


class Meeting(IdentifierMixin, TimestampMixin, Base):
    """A board or general meeting held by a company."""

    __tablename__ = "meetings"
    __table_args__ = (Index("ix_meetings_company_id", "company_id"),)

    company_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("companies.id", ondelete="CASCADE"), nullable=False
    )
    type: Mapped[MeetingType] = mapped_column(SAEnum(MeetingType, name="meeting_type"), nullable=False)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
    address: Mapped[str] = mapped_column(String(512), nullable=False)
    chairman_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("participants.id", ondelete="SET NULL")
    )
    secretary_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("participants.id", ondelete="SET NULL")
    )

    company = relationship("Company", back_populates="meetings")
    chairman = relationship("Participant", foreign_keys=[chairman_id])
    secretary = relationship("Participant", foreign_keys=[secretary_id])
    roster = relationship(
        "MeetingParticipant", back_populates="meeting", cascade="all, delete-orphan"
    )
    topics = relationship("Topic", back_populates="meeting", cascade="all, delete-orphan")


__all__ = ["Meeting"]
