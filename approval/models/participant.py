"""Participant and meeting roster ORM models."""
from __future__ import annotations

from sqlalchemy import Boolean, Float, ForeignKey, Index, String, UniqueConstraint
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from approval.models.base import Base, IdentifierMixin, TimestampMixin
from approval.models.enums import ParticipantType


class Participant(IdentifierMixin, TimestampMixin, Base):
    """Owner or board member of a company.

    ``share`` is the ownership percentage (0-100) used to weight votes at
    general meetings.
    """

    __tablename__ = "participants"
    __table_args__ = (
        UniqueConstraint("company_id", "name", "type", name="uq_participants_company_name_type"),
        Index("ix_participants_company_id", "company_id"),
    )

    company_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("companies.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    share: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    type: Mapped[ParticipantType] = mapped_column(
        SAEnum(ParticipantType, name="participant_type"), nullable=False
    )
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    company = relationship("Company", back_populates="participants")
    meeting_entries = relationship(
        "MeetingParticipant", back_populates="participant", cascade="all, delete-orphan"
    )


class MeetingParticipant(IdentifierMixin, TimestampMixin, Base):
    """Roster entry recording that a participant attends a meeting."""

    __tablename__ = "meeting_participants"
    __table_args__ = (
        UniqueConstraint("meeting_id", "participant_id", name="uq_meeting_participants_meeting_participant"),
        Index("ix_meeting_participants_meeting_id", "meeting_id"),
    )

    meeting_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("meetings.id", ondelete="CASCADE"), nullable=False
    )
    participant_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("participants.id", ondelete="CASCADE"), nullable=False
    )
    is_present: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    meeting = relationship("Meeting", back_populates="roster")
    participant = relationship("Participant", back_populates="meeting_entries")
    voters = relationship("Voter", back_populates="meeting_participant", cascade="all")


__all__ = ["MeetingParticipant", "Participant"]
