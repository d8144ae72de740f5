"""Schemas for voting sessions, voters and ballot submissions."""
from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from approval.models.enums import VoteType


class BallotSubmission(BaseModel):
    """One vote submitted for a voter; ``vote`` is a vote type label."""

    voter_id: str = Field(..., max_length=36)
    vote: str = Field(..., min_length=1)
    related_party_deal: bool | None = None


class VoteSubmissionRequest(BaseModel):
    voters: list[BallotSubmission]


class VoterUpdate(BaseModel):
    related_party_deal: bool


class VoterRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    voting_id: str
    topic_id: str
    meeting_participant_id: str
    vote: str
    related_party_deal: bool = Field(
        validation_alias=AliasChoices("related_party_deal", "is_related_party_deal")
    )

    @field_validator("vote", mode="before")
    @classmethod
    def _vote_label(cls, value: object) -> object:
        if isinstance(value, VoteType):
            return value.label
        return value


class VotingRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    topic_id: str
    accepted: bool
    voter_ids: list[str] = Field(
        default_factory=list, validation_alias=AliasChoices("voter_ids", "voters")
    )

    @field_validator("voter_ids", mode="before")
    @classmethod
    def _voter_ids(cls, value: object) -> object:
        if value is None:
            return []
        return [getattr(item, "id", item) for item in value]


__all__ = [
    "BallotSubmission",
    "VoteSubmissionRequest",
    "VoterRead",
    "VoterUpdate",
    "VotingRead",
]
