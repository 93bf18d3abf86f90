"""
Application Services
"""

from .leaderboard_service import LeaderboardService
from .mock_data import MockLeaderboardSource

__all__ = [
    "LeaderboardService",
    "MockLeaderboardSource",
]
