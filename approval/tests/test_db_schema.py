"""Schema integrity tests for the approval migration."""
from __future__ import annotations

from pathlib import Path

import pytest
import sqlalchemy as sa
from alembic import command
from alembic.config import Config


@pytest.fixture(scope="session")
def alembic_config(tmp_path_factory: pytest.TempPathFactory) -> Config:
    """Provide Alembic config bound to a temporary SQLite database."""

    project_root = Path(__file__).resolve().parents[2]
    db_path = tmp_path_factory.mktemp("db") / "schema.db"

    config = Config(str(project_root / "alembic.ini"))
    config.set_main_option("sqlalchemy.url", f"sqlite:///{db_path}")
    config.set_main_option("script_location", str(project_root / "migrations"))
    return config


@pytest.fixture(scope="session")
def migrated_engine(alembic_config: Config):
    """Run migrations against SQLite and yield an engine."""

    command.upgrade(alembic_config, "head")
    engine = sa.create_engine(alembic_config.get_main_option("sqlalchemy.url"))
    try:
        yield engine
    finally:
        engine.dispose()


def test_tables_exist(migrated_engine: sa.Engine) -> None:
    inspector = sa.inspect(migrated_engine)
    tables = set(inspector.get_table_names())
    expected = {
        "companies",
        "participants",
        "meetings",
        "meeting_participants",
        "topics",
        "votings",
        "voters",
    }
    assert expected.issubset(tables)


def test_foreign_keys_enforced(migrated_engine: sa.Engine) -> None:
    inspector = sa.inspect(migrated_engine)
    fk_expectations = {
        "participants": {"company_id": "companies"},
        "meetings": {
            "company_id": "companies",
            "chairman_id": "participants",
            "secretary_id": "participants",
        },
        "meeting_participants": {"meeting_id": "meetings", "participant_id": "participants"},
        "topics": {"meeting_id": "meetings"},
        "votings": {"topic_id": "topics"},
        "voters": {
            "voting_id": "votings",
            "topic_id": "topics",
            "meeting_participant_id": "meeting_participants",
        },
    }

    for table, expected in fk_expectations.items():
        foreign_keys = inspector.get_foreign_keys(table)
        fk_map = {tuple(fk["constrained_columns"]): fk["referred_table"] for fk in foreign_keys}
        for column, target in expected.items():
            assert (column,) in fk_map
            assert fk_map[(column,)] == target


def test_unique_constraints(migrated_engine: sa.Engine) -> None:
    inspector = sa.inspect(migrated_engine)
    unique_expectations = {
        "companies": {"uq_companies_inn": {"inn"}},
        "participants": {"uq_participants_company_name_type": {"company_id", "name", "type"}},
        "meeting_participants": {
            "uq_meeting_participants_meeting_participant": {"meeting_id", "participant_id"}
        },
        "votings": {"uq_votings_topic": {"topic_id"}},
        "voters": {
            "uq_voters_voting_meeting_participant": {"voting_id", "meeting_participant_id"}
        },
    }

    for table, expected in unique_expectations.items():
        constraints = inspector.get_unique_constraints(table)
        found = {constraint["name"]: set(constraint["column_names"]) for constraint in constraints}
        for name, columns in expected.items():
            assert name in found
            assert found[name] == columns


def test_scoping_indexes(migrated_engine: sa.Engine) -> None:
    inspector = sa.inspect(migrated_engine)
    index_expectations = {
        "participants": "ix_participants_company_id",
        "meetings": "ix_meetings_company_id",
        "meeting_participants": "ix_meeting_participants_meeting_id",
        "topics": "ix_topics_meeting_id",
        "voters": "ix_voters_topic_id",
    }

    for table, index_name in index_expectations.items():
        indexes = {index["name"] for index in inspector.get_indexes(table)}
        assert index_name in indexes


def test_models_match_migration(migrated_engine: sa.Engine) -> None:
    from approval.models import Base

    inspector = sa.inspect(migrated_engine)
    for table in Base.metadata.sorted_tables:
        migrated = {column["name"] for column in inspector.get_columns(table.name)}
        assert {column.name for column in table.columns} == migrated
