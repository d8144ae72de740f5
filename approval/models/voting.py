"""Voting session and voter ORM models."""
from __future__ import annotations

from sqlalchemy import Boolean, ForeignKey, Index, String, UniqueConstraint
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from approval.models.base import Base, IdentifierMixin, TimestampMixin
from approval.models.enums import VoteType


class Voting(IdentifierMixin, TimestampMixin, Base):
    """Decision process for a single topic.

    The unique constraint on ``topic_id`` keeps concurrent find-or-create
    calls from producing two sessions for one topic.
    """

    __tablename__ = "votings"
    __table_args__ = (UniqueConstraint("topic_id", name="uq_votings_topic"),)

    topic_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("topics.id", ondelete="CASCADE"), nullable=False
    )
    accepted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    topic = relationship("Topic", back_populates="voting")
    voters = relationship(
        "Voter",
        back_populates="voting",
        cascade="all, delete-orphan",
        order_by="Voter.created_at",
    )

    def __repr__(self) -> str:
        return (
            f"Voting(id={self.id!r}, topic_id={self.topic_id!r}, accepted={self.accepted!r}, "
            f"voters={len(self.voters)})"
        )


class Voter(IdentifierMixin, TimestampMixin, Base):
    """Ballot of one meeting roster entry within a voting."""

    __tablename__ = "voters"
    __table_args__ = (
        UniqueConstraint(
            "voting_id", "meeting_participant_id", name="uq_voters_voting_meeting_participant"
        ),
        Index("ix_voters_topic_id", "topic_id"),
    )

    voting_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("votings.id", ondelete="CASCADE"), nullable=False
    )
    topic_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("topics.id", ondelete="CASCADE"), nullable=False
    )
    meeting_participant_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("meeting_participants.id", ondelete="CASCADE"), nullable=False
    )
    vote: Mapped[VoteType] = mapped_column(
        SAEnum(VoteType, name="vote_type"), nullable=False, default=VoteType.NOT_VOTED
    )
    is_related_party_deal: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    voting = relationship("Voting", back_populates="voters")
    meeting_participant = relationship("MeetingParticipant", back_populates="voters")


__all__ = ["Voter", "Voting"]
