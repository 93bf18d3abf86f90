"""
Leaderboard Domain

Models and pure logic for building the guild leaderboard.
"""

from .aggregator import LeaderboardAggregator, spec_slug
from .summary import LeaderboardSummaryService

__all__ = [
    "LeaderboardAggregator",
    "spec_slug",
    "LeaderboardSummaryService",
]
