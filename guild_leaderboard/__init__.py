"""
Guild Leaderboard

Ranks the members of a World of Warcraft guild by their Warcraft Logs
raid parses.
"""

__version__ = "1.0.0"

from .core.config import Settings
from .core.exceptions import LeaderboardError

__all__ = [
    "Settings",
    "LeaderboardError",
    "__version__",
]
