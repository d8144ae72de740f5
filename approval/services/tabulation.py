"""Outcome rules for voting sessions.

A board of directors decides by head count: every ``YES`` ballot weighs one and
the topic passes when that weight exceeds half of the ballots submitted.
General meetings of owners decide by ownership: every ``YES`` ballot weighs the
voter's share percentage and the topic passes when that weight exceeds 50.

Both comparisons are strict, so ties and empty batches are rejected. The rules
work on plain values so they can be exercised without a database.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from approval.models.enums import MeetingType, VoteType


@dataclass(frozen=True, slots=True)
class WeightedBallot:
    """A resolved vote together with the voter's ownership share."""

    vote: VoteType
    share: float = 0.0


@dataclass(frozen=True, slots=True)
class TabulationResult:
    approval_weight: float
    threshold: float
    accepted: bool


class MajorityRule:
    """Strict majority of approval weight over a rule-specific threshold."""

    name = "majority"

    def weight(self, ballot: WeightedBallot) -> float:
        raise NotImplementedError

    def threshold(self, ballots: Sequence[WeightedBallot]) -> float:
        raise NotImplementedError

    def approval_weight(self, ballots: Sequence[WeightedBallot]) -> float:
        return sum(self.weight(ballot) for ballot in ballots if ballot.vote is VoteType.YES)

    def evaluate(self, ballots: Sequence[WeightedBallot]) -> TabulationResult:
        approval_weight = float(self.approval_weight(ballots))
        threshold = float(self.threshold(ballots))
        return TabulationResult(
            approval_weight=approval_weight,
            threshold=threshold,
            accepted=approval_weight > threshold,
        )


class HeadCountMajority(MajorityRule):
    """One head, one vote; measured against the ballots in the batch."""

    name = "head_count"

    def weight(self, ballot: WeightedBallot) -> float:
        return 1.0

    def threshold(self, ballots: Sequence[WeightedBallot]) -> float:
        return len(ballots) * 0.5


class ShareMajority(MajorityRule):
    """Votes weighted by ownership percentage out of 100."""

    name = "share_weighted"

    def weight(self, ballot: WeightedBallot) -> float:
        return ballot.share

    def threshold(self, ballots: Sequence[WeightedBallot]) -> float:
        return 50.0


_RULES: dict[MeetingType, MajorityRule] = {
    MeetingType.BOD: HeadCountMajority(),
    MeetingType.FMS: ShareMajority(),
    MeetingType.FMP: ShareMajority(),
}


def rule_for(meeting_type: MeetingType) -> MajorityRule:
    """Return the outcome rule applied to meetings of ``meeting_type``."""
    return _RULES[meeting_type]


__all__ = [
    "HeadCountMajority",
    "MajorityRule",
    "ShareMajority",
    "TabulationResult",
    "WeightedBallot",
    "rule_for",
]
