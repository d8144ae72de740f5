"""Corporate meeting approval service: rosters, ballots and vote tabulation."""

__version__ = "0.1.0"
