"""Seed script for a demo company with a general meeting of shareholders."""
from __future__ import annotations

import datetime
import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from approval.db.session import engine, get_session
from approval.models import Base, Company, CompanyType, MeetingType, ParticipantType
from approval.services.companies import create_company
from approval.services.meeting_participants import RosterAddition, add_meeting_participants
from approval.services.meetings import create_meeting
from approval.services.participants import create_participant
from approval.services.topics import create_topic

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEMO_INN = 7701234567
DEMO_OWNERS = (("Иванов И.И.", 40.0), ("Петров П.П.", 35.0), ("Сидоров С.С.", 25.0))


def seed(session: Session) -> None:
    """Create the demo company, its owners, a meeting and one agenda topic."""

    existing = session.scalars(select(Company).where(Company.inn == DEMO_INN)).one_or_none()
    if existing is not None:
        logger.info("Demo company %s already exists", existing.id)
        return

    company = create_company(
        session,
        title="АО Демо",
        inn=DEMO_INN,
        company_type=CompanyType.JSC,
        has_board_of_directors=False,
    )
    owners = [
        create_participant(
            session, company_id=company.id, name=name, share=share, type=ParticipantType.OWNER
        )
        for name, share in DEMO_OWNERS
    ]
    meeting = create_meeting(
        session,
        company_id=company.id,
        type=MeetingType.FMS,
        date=datetime.date.today(),
        address="Москва, ул. Тверская, 1",
        chairman_id=owners[0].id,
        secretary_id=owners[1].id,
    )
    add_meeting_participants(
        session,
        company_id=company.id,
        meeting_id=meeting.id,
        additions=[RosterAddition(participant_id=owner.id, is_present=True) for owner in owners],
    )
    topic = create_topic(
        session,
        company_id=company.id,
        meeting_id=meeting.id,
        title="Утверждение годового отчёта",
    )
    logger.info("Seeded company %s, meeting %s and topic %s", company.id, meeting.id, topic.id)


def main() -> None:
    Base.metadata.create_all(bind=engine)
    with get_session() as session:
        seed(session)


if __name__ == "__main__":
    main()
