"""Voting session lifecycle and vote tabulation."""
from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from approval.core.exceptions import TopicNotFoundError, VotingNotFoundError, require
from approval.models import Topic, VoteType, Voting
from approval.obs import record_tabulation, traced_span
from approval.services.meetings import verify_company_and_meeting
from approval.services.tabulation import WeightedBallot, rule_for
from approval.services.voters import ensure_roster, get_voter, submit_vote

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Ballot:
    """A vote submission: the voter, a vote type label and an optional conflict flag."""

    voter_id: str
    vote: str
    related_party_deal: bool | None = None


@contextmanager
def _unit_of_work(session: Session) -> Iterator[None]:
    """Commit the enclosed work, or roll all of it back on the first error."""

    try:
        yield
        session.commit()
    except Exception:
        session.rollback()
        raise


def _find_voting(session: Session, topic_id: str) -> Voting | None:
    return session.scalars(select(Voting).where(Voting.topic_id == topic_id)).one_or_none()


def _get_topic(session: Session, topic_id: str) -> Topic:
    require(topic_id, "Topic ID")
    topic = session.get(Topic, topic_id)
    if topic is None:
        raise TopicNotFoundError(topic_id)
    return topic


def get_or_create_voting(session: Session, topic: Topic) -> Voting:
    """Return the topic's voting, creating an open one if none exists.

    Creation relies on the unique constraint on ``votings.topic_id``: when a
    concurrent request inserted the row first, the insert fails inside its
    savepoint and the existing row is read back instead.
    """

    require(topic, "Topic")
    require(topic.id, "Topic ID")

    voting = _find_voting(session, topic.id)
    if voting is not None:
        return voting

    try:
        with session.begin_nested():
            voting = Voting(topic=topic, accepted=False)
            session.add(voting)
            session.flush()
    except IntegrityError:
        session.expire(topic, ["voting"])
        voting = _find_voting(session, topic.id)
        if voting is None:
            raise
        logger.info("Voting for topic %s was created concurrently", topic.id)
        return voting

    logger.info("Opened voting %s for topic %s", voting.id, topic.id)
    return voting


def create_voting_for_topic(session: Session, topic_id: str) -> Voting:
    """Find or create the topic's voting and bring its voter roster up to date."""

    topic = _get_topic(session, topic_id)
    voting = get_or_create_voting(session, topic)
    ensure_roster(session, voting)
    return voting


def get_voting_by_topic(session: Session, topic_id: str) -> Voting:
    require(topic_id, "Topic ID")
    voting = _find_voting(session, topic_id)
    if voting is None:
        raise VotingNotFoundError(topic_id)
    return voting


def extend_votings_for_meeting(session: Session, meeting_id: str) -> None:
    """Add voters for new roster entries to every voting of the meeting."""

    require(meeting_id, "Meeting ID")
    topics = session.scalars(select(Topic).where(Topic.meeting_id == meeting_id)).all()
    for topic in topics:
        ensure_roster(session, get_or_create_voting(session, topic))


def delete_voting_for_topic(session: Session, topic_id: str) -> None:
    """Delete the topic's voting together with its voters; a missing voting is ignored."""

    require(topic_id, "Topic ID")
    voting = _find_voting(session, topic_id)
    if voting is None:
        return
    topic = voting.topic
    session.delete(voting)
    session.flush()
    session.expire(topic, ["voting"])
    logger.info("Deleted voting %s for topic %s", voting.id, topic_id)


def _weigh(session: Session, topic_id: str, ballot: Ballot) -> WeightedBallot:
    vote = VoteType.from_label(ballot.vote)
    voter = get_voter(session, ballot.voter_id, topic_id=topic_id)
    return WeightedBallot(vote=vote, share=voter.meeting_participant.participant.share)


def tabulate(session: Session, topic_id: str, ballots: Sequence[Ballot]) -> Voting:
    """Recompute whether the topic's voting is accepted from ``ballots``.

    The rule follows the meeting type: head count for board meetings, share
    percentage for general meetings. Only the ballots of this batch count.
    """

    require(ballots, "Ballots")
    voting = get_voting_by_topic(session, topic_id)
    meeting_type = voting.topic.meeting.type
    rule = rule_for(meeting_type)

    with traced_span(
        "voting.tabulate",
        topic_id=topic_id,
        meeting_type=meeting_type.value,
        ballots=len(ballots),
    ) as span:
        weighted = [_weigh(session, topic_id, ballot) for ballot in ballots]
        result = rule.evaluate(weighted)
        span.set_attribute("accepted", result.accepted)

    voting.accepted = result.accepted
    session.flush()
    record_tabulation(meeting_type.value, result.accepted)
    logger.info(
        "Voting %s on topic %s %s under %s rule (weight %.2f, threshold %.2f)",
        voting.id,
        topic_id,
        "accepted" if result.accepted else "rejected",
        rule.name,
        result.approval_weight,
        result.threshold,
    )
    return voting


def submit_votes(
    session: Session,
    *,
    company_id: str,
    meeting_id: str,
    topic_id: str,
    ballots: Sequence[Ballot],
) -> Voting:
    """Apply a batch of ballots in order, then re-tabulate the topic.

    The batch is one unit of work: the first invalid ballot aborts it and
    nothing from the batch is kept.
    """

    require(company_id, "Company ID")
    require(meeting_id, "Meeting ID")
    require(topic_id, "Topic ID")
    require(ballots, "Ballots")

    with _unit_of_work(session):
        meeting = verify_company_and_meeting(session, company_id, meeting_id)
        topic = _get_topic(session, topic_id)
        if topic.meeting_id != meeting.id:
            raise TopicNotFoundError(topic_id)

        for ballot in ballots:
            submit_vote(
                session,
                ballot.voter_id,
                ballot.vote,
                topic_id=topic_id,
                related_party_deal=ballot.related_party_deal,
            )
        voting = tabulate(session, topic_id, ballots)

    return voting


__all__ = [
    "Ballot",
    "create_voting_for_topic",
    "delete_voting_for_topic",
    "extend_votings_for_meeting",
    "get_or_create_voting",
    "get_voting_by_topic",
    "submit_votes",
    "tabulate",
]
