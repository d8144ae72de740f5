from __future__ import annotations

import pytest
from sqlalchemy import select
from sqlalchemy.orm import Session

from approval.core.exceptions import InvalidArgumentError
from approval.models import MeetingType, ParticipantType, Voter, VoteType
from approval.services.meetings import list_roster_entries
from approval.services.voters import ensure_roster, list_voters_by_topic
from approval.services.voting import create_voting_for_topic, get_voting_by_topic
from tests.factories import make_company, make_meeting, make_participant, make_topic, seat


def _voter_count(session: Session, topic_id: str) -> int:
    return len(session.scalars(select(Voter).where(Voter.topic_id == topic_id)).all())


def test_topic_creation_builds_roster(db_session: Session) -> None:
    company = make_company(db_session)
    meeting = make_meeting(db_session, company)
    owners = [
        make_participant(db_session, company, "Анна", share=60.0),
        make_participant(db_session, company, "Борис", share=40.0),
    ]
    entries = seat(db_session, meeting, *owners)

    topic = make_topic(db_session, meeting)
    db_session.commit()

    voters = list_voters_by_topic(db_session, topic.id)
    assert {voter.meeting_participant_id for voter in voters} == {entry.id for entry in entries}
    assert all(voter.vote is VoteType.NOT_VOTED for voter in voters)
    assert all(voter.is_related_party_deal is False for voter in voters)
    voting = get_voting_by_topic(db_session, topic.id)
    assert all(voter.voting_id == voting.id for voter in voters)
    assert voting.accepted is False


def test_ensure_roster_is_idempotent(db_session: Session) -> None:
    company = make_company(db_session)
    meeting = make_meeting(db_session, company)
    seat(db_session, meeting, make_participant(db_session, company, "Анна", share=100.0))
    topic = make_topic(db_session, meeting)
    db_session.commit()

    voting = get_voting_by_topic(db_session, topic.id)
    first = ensure_roster(db_session, voting)
    second = ensure_roster(db_session, voting)
    db_session.commit()

    assert [voter.id for voter in first] == [voter.id for voter in second]
    assert _voter_count(db_session, topic.id) == 1


def test_create_voting_twice_returns_same_voting(db_session: Session) -> None:
    company = make_company(db_session)
    meeting = make_meeting(db_session, company)
    seat(db_session, meeting, make_participant(db_session, company, "Анна", share=100.0))
    topic = make_topic(db_session, meeting)
    db_session.commit()

    first = create_voting_for_topic(db_session, topic.id)
    second = create_voting_for_topic(db_session, topic.id)
    db_session.commit()

    assert first.id == second.id
    assert _voter_count(db_session, topic.id) == 1


def test_roster_extends_when_participant_joins(db_session: Session) -> None:
    company = make_company(db_session)
    meeting = make_meeting(db_session, company, type=MeetingType.BOD)
    board = ParticipantType.MEMBER_OF_BOARD
    seat(db_session, meeting, make_participant(db_session, company, "Анна", type=board))
    first_topic = make_topic(db_session, meeting, "Бюджет")
    second_topic = make_topic(db_session, meeting, "Аудитор")
    db_session.commit()

    [late_entry] = seat(db_session, meeting, make_participant(db_session, company, "Борис", type=board))
    db_session.commit()

    for topic in (first_topic, second_topic):
        voters = list_voters_by_topic(db_session, topic.id)
        assert len(voters) == 2
        assert late_entry.id in {voter.meeting_participant_id for voter in voters}


def test_empty_roster_creates_no_voters(db_session: Session) -> None:
    company = make_company(db_session)
    meeting = make_meeting(db_session, company)
    topic = make_topic(db_session, meeting)
    db_session.commit()

    voting = get_voting_by_topic(db_session, topic.id)

    assert ensure_roster(db_session, voting) == []
    assert _voter_count(db_session, topic.id) == 0


def test_ensure_roster_requires_voting(db_session: Session) -> None:
    with pytest.raises(InvalidArgumentError):
        ensure_roster(db_session, None)  # type: ignore[arg-type]


def test_voters_follow_the_meeting_roster_only(db_session: Session) -> None:
    company = make_company(db_session)
    meeting = make_meeting(db_session, company)
    other_meeting = make_meeting(db_session, company)
    first = make_participant(db_session, company, "Вера", share=50.0)
    second = make_participant(db_session, company, "Глеб", share=50.0)
    seat(db_session, meeting, first)
    seat(db_session, meeting, second)
    seat(db_session, other_meeting, first)
    topic = make_topic(db_session, meeting)
    db_session.commit()

    roster = list_roster_entries(db_session, meeting.id)

    assert sorted(entry.participant_id for entry in roster) == sorted([first.id, second.id])
    voters = list_voters_by_topic(db_session, topic.id)
    assert {voter.meeting_participant_id for voter in voters} == {entry.id for entry in roster}


def test_roster_listing_requires_meeting_id(db_session: Session) -> None:
    with pytest.raises(InvalidArgumentError):
        list_roster_entries(db_session, None)  # type: ignore[arg-type]
