"""Initial schema for companies, meetings, topics and votings."""
from __future__ import annotations

from collections.abc import Iterable

import sqlalchemy as sa
from alembic import op

revision = "20241015_01"
down_revision = None
branch_labels = None
depends_on: Iterable[str] | None = None

_ENUM_NAMES = ("vote_type", "meeting_type", "participant_type", "company_type")


def _drop_enum(name: str) -> None:
    bind = op.get_bind()
    if bind.dialect.name == "postgresql":
        op.execute(sa.text(f"DROP TYPE IF EXISTS {name}"))


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:  # noqa: D401
    """Create the approval tables and constraints."""

    company_type = sa.Enum("JSC", "LLC", name="company_type")
    participant_type = sa.Enum("OWNER", "MEMBER_OF_BOARD", name="participant_type")
    meeting_type = sa.Enum("BOD", "FMP", "FMS", name="meeting_type")
    vote_type = sa.Enum("NOT_VOTED", "YES", "NO", "ABSTAINED", name="vote_type")

    op.create_table(
        "companies",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("inn", sa.BigInteger(), nullable=False),
        sa.Column("company_type", company_type, nullable=False),
        sa.Column("has_board_of_directors", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
        sa.UniqueConstraint("inn", name="uq_companies_inn"),
    )

    op.create_table(
        "participants",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("company_id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("share", sa.Float(), nullable=False, server_default="0"),
        sa.Column("type", participant_type, nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.ForeignKeyConstraint(["company_id"], ["companies.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("company_id", "name", "type", name="uq_participants_company_name_type"),
    )
    op.create_index("ix_participants_company_id", "participants", ["company_id"])

    op.create_table(
        "meetings",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("company_id", sa.String(length=36), nullable=False),
        sa.Column("type", meeting_type, nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("address", sa.String(length=512), nullable=False),
        sa.Column("chairman_id", sa.String(length=36)),
        sa.Column("secretary_id", sa.String(length=36)),
        *_timestamps(),
        sa.ForeignKeyConstraint(["company_id"], ["companies.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["chairman_id"], ["participants.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["secretary_id"], ["participants.id"], ondelete="SET NULL"),
    )
    op.create_index("ix_meetings_company_id", "meetings", ["company_id"])

    op.create_table(
        "meeting_participants",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("meeting_id", sa.String(length=36), nullable=False),
        sa.Column("participant_id", sa.String(length=36), nullable=False),
        sa.Column("is_present", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
        sa.ForeignKeyConstraint(["meeting_id"], ["meetings.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["participant_id"], ["participants.id"], ondelete="CASCADE"),
        sa.UniqueConstraint(
            "meeting_id", "participant_id", name="uq_meeting_participants_meeting_participant"
        ),
    )
    op.create_index("ix_meeting_participants_meeting_id", "meeting_participants", ["meeting_id"])

    op.create_table(
        "topics",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("meeting_id", sa.String(length=36), nullable=False),
        sa.Column("title", sa.String(length=1024), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["meeting_id"], ["meetings.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_topics_meeting_id", "topics", ["meeting_id"])

    op.create_table(
        "votings",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("topic_id", sa.String(length=36), nullable=False),
        sa.Column("accepted", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
        sa.ForeignKeyConstraint(["topic_id"], ["topics.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("topic_id", name="uq_votings_topic"),
    )

    op.create_table(
        "voters",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("voting_id", sa.String(length=36), nullable=False),
        sa.Column("topic_id", sa.String(length=36), nullable=False),
        sa.Column("meeting_participant_id", sa.String(length=36), nullable=False),
        sa.Column("vote", vote_type, nullable=False, server_default="NOT_VOTED"),
        sa.Column("is_related_party_deal", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
        sa.ForeignKeyConstraint(["voting_id"], ["votings.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["topic_id"], ["topics.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["meeting_participant_id"], ["meeting_participants.id"], ondelete="CASCADE"
        ),
        sa.UniqueConstraint(
            "voting_id", "meeting_participant_id", name="uq_voters_voting_meeting_participant"
        ),
    )
    op.create_index("ix_voters_topic_id", "voters", ["topic_id"])


def downgrade() -> None:  # noqa: D401
    """Drop all approval tables."""

    op.drop_index("ix_voters_topic_id", table_name="voters")
    op.drop_table("voters")
    op.drop_table("votings")

    op.drop_index("ix_topics_meeting_id", table_name="topics")
    op.drop_table("topics")

    op.drop_index("ix_meeting_participants_meeting_id", table_name="meeting_participants")
    op.drop_table("meeting_participants")

    op.drop_index("ix_meetings_company_id", table_name="meetings")
    op.drop_table("meetings")

    op.drop_index("ix_participants_company_id", table_name="participants")
    op.drop_table("participants")

    op.drop_table("companies")

    for name in _ENUM_NAMES:
        _drop_enum(name)
