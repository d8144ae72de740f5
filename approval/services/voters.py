"""Voter roster building and individual vote submission."""
from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from approval.core.exceptions import (
    MeetingNotFoundError,
    TopicNotFoundError,
    VoterNotFoundError,
    require,
)
from approval.models import Meeting, Topic, Voter, VoteType, Voting
from approval.obs import record_vote
from approval.services.meetings import list_roster_entries

logger = logging.getLogger(__name__)


def ensure_roster(session: Session, voting: Voting) -> list[Voter]:
    """Give every roster entry of the voting's meeting exactly one voter.

    Safe to call repeatedly: entries that already hold a voter are skipped, so
    later calls only add voters for participants who joined the meeting since.
    Each new voter is inserted in its own savepoint; a unique-constraint
    violation means a concurrent call created it first.
    """

    require(voting, "Voting")
    topic = session.get(Topic, voting.topic_id)
    if topic is None:
        raise TopicNotFoundError(voting.topic_id)
    meeting = session.get(Meeting, topic.meeting_id)
    if meeting is None:
        raise MeetingNotFoundError(topic.meeting_id)

    existing = {voter.meeting_participant_id for voter in voting.voters}
    created = 0
    for entry in list_roster_entries(session, meeting.id):
        if entry.id in existing:
            continue
        try:
            with session.begin_nested():
                voter = Voter(
                    voting=voting,
                    topic_id=topic.id,
                    meeting_participant=entry,
                    vote=VoteType.NOT_VOTED,
                    is_related_party_deal=False,
                )
                session.add(voter)
                session.flush()
        except IntegrityError:
            logger.info(
                "Voter for roster entry %s already exists in voting %s", entry.id, voting.id
            )
            continue
        existing.add(entry.id)
        created += 1

    if created:
        logger.info("Added %d voter(s) to voting %s", created, voting.id)
    return list(voting.voters)


def get_voter(session: Session, voter_id: str, *, topic_id: str | None = None) -> Voter:
    """Return the voter, optionally requiring it to belong to ``topic_id``."""

    require(voter_id, "Voter ID")
    voter = session.get(Voter, voter_id)
    if voter is None or (topic_id is not None and voter.topic_id != topic_id):
        raise VoterNotFoundError(voter_id)
    return voter


def list_voters_by_topic(session: Session, topic_id: str) -> list[Voter]:
    require(topic_id, "Topic ID")
    statement = select(Voter).where(Voter.topic_id == topic_id).order_by(Voter.created_at, Voter.id)
    return list(session.scalars(statement).all())


def submit_vote(
    session: Session,
    voter_id: str,
    vote_label: str,
    *,
    topic_id: str | None = None,
    related_party_deal: bool | None = None,
) -> Voter:
    """Record a vote given by its label.

    The label is resolved before the voter is touched, so an unknown label
    leaves the stored vote as it was. Resubmitting overwrites the vote.
    """

    vote = VoteType.from_label(vote_label)
    voter = get_voter(session, voter_id, topic_id=topic_id)
    voter.vote = vote
    if related_party_deal is not None:
        voter.is_related_party_deal = related_party_deal
    session.flush()
    record_vote(vote.name)
    logger.info("Voter %s voted %s on topic %s", voter.id, vote.name, voter.topic_id)
    return voter


def update_voter(
    session: Session, voter_id: str, *, related_party_deal: bool, topic_id: str | None = None
) -> Voter:
    """Set the related-party (conflict of interest) flag of a voter."""

    voter = get_voter(session, voter_id, topic_id=topic_id)
    voter.is_related_party_deal = related_party_deal
    session.flush()
    return voter


def delete_voter(session: Session, voter_id: str, *, topic_id: str | None = None) -> None:
    """Drop a voter from its voting; the roster entry itself stays."""

    voter = get_voter(session, voter_id, topic_id=topic_id)
    voter_topic_id = voter.topic_id
    session.delete(voter)
    session.flush()
    logger.info("Deleted voter %s from topic %s", voter_id, voter_topic_id)


__all__ = [
    "delete_voter",
    "ensure_roster",
    "get_voter",
    "list_voters_by_topic",
    "submit_vote",
    "update_voter",
]
