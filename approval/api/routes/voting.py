"""Voting endpoints for a single agenda topic."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from approval.api.deps import get_db_session
from approval.schemas.voting import VoteSubmissionRequest, VoterRead, VoterUpdate, VotingRead
from approval.services import voters as voter_service
from approval.services import voting as voting_service
from approval.services.topics import get_topic

router = APIRouter()


def _voting_view(session: Session, topic_id: str) -> VotingRead:
    voting = voting_service.get_voting_by_topic(session, topic_id)
    session.refresh(voting)
    return VotingRead.model_validate(voting)


@router.post("", response_model=VotingRead)
def create_voting(
    company_id: str,
    meeting_id: str,
    topic_id: str,
    session: Session = Depends(get_db_session),
) -> VotingRead:
    """Open the topic's voting if needed and add voters for new roster entries."""
    get_topic(session, company_id=company_id, meeting_id=meeting_id, topic_id=topic_id)
    voting_service.create_voting_for_topic(session, topic_id)
    session.commit()
    return _voting_view(session, topic_id)


@router.get("", response_model=VotingRead)
def get_voting(
    company_id: str,
    meeting_id: str,
    topic_id: str,
    session: Session = Depends(get_db_session),
) -> VotingRead:
    get_topic(session, company_id=company_id, meeting_id=meeting_id, topic_id=topic_id)
    voting = voting_service.get_voting_by_topic(session, topic_id)
    return VotingRead.model_validate(voting)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def delete_voting(
    company_id: str,
    meeting_id: str,
    topic_id: str,
    session: Session = Depends(get_db_session),
) -> None:
    get_topic(session, company_id=company_id, meeting_id=meeting_id, topic_id=topic_id)
    voting_service.delete_voting_for_topic(session, topic_id)
    session.commit()


@router.post("/make_vote", response_model=VotingRead, status_code=status.HTTP_201_CREATED)
def make_vote(
    company_id: str,
    meeting_id: str,
    topic_id: str,
    payload: VoteSubmissionRequest,
    session: Session = Depends(get_db_session),
) -> VotingRead:
    ballots = [
        voting_service.Ballot(
            voter_id=item.voter_id, vote=item.vote, related_party_deal=item.related_party_deal
        )
        for item in payload.voters
    ]
    voting_service.submit_votes(
        session,
        company_id=company_id,
        meeting_id=meeting_id,
        topic_id=topic_id,
        ballots=ballots,
    )
    return _voting_view(session, topic_id)


@router.get("/voters", response_model=list[VoterRead])
def list_voters(
    company_id: str,
    meeting_id: str,
    topic_id: str,
    session: Session = Depends(get_db_session),
) -> list[VoterRead]:
    get_topic(session, company_id=company_id, meeting_id=meeting_id, topic_id=topic_id)
    return [
        VoterRead.model_validate(voter)
        for voter in voter_service.list_voters_by_topic(session, topic_id)
    ]


@router.get("/voters/{voter_id}", response_model=VoterRead)
def get_voter(
    company_id: str,
    meeting_id: str,
    topic_id: str,
    voter_id: str,
    session: Session = Depends(get_db_session),
) -> VoterRead:
    get_topic(session, company_id=company_id, meeting_id=meeting_id, topic_id=topic_id)
    voter = voter_service.get_voter(session, voter_id, topic_id=topic_id)
    return VoterRead.model_validate(voter)


@router.patch("/voters/{voter_id}", response_model=VoterRead)
def update_voter(
    company_id: str,
    meeting_id: str,
    topic_id: str,
    voter_id: str,
    payload: VoterUpdate,
    session: Session = Depends(get_db_session),
) -> VoterRead:
    get_topic(session, company_id=company_id, meeting_id=meeting_id, topic_id=topic_id)
    voter = voter_service.update_voter(
        session, voter_id, related_party_deal=payload.related_party_deal, topic_id=topic_id
    )
    session.commit()
    session.refresh(voter)
    return VoterRead.model_validate(voter)


@router.delete("/voters/{voter_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_voter(
    company_id: str,
    meeting_id: str,
    topic_id: str,
    voter_id: str,
    session: Session = Depends(get_db_session),
) -> None:
    get_topic(session, company_id=company_id, meeting_id=meeting_id, topic_id=topic_id)
    voter_service.delete_voter(session, voter_id, topic_id=topic_id)
    session.commit()
