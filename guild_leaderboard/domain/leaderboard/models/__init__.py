"""
Leaderboard Domain Models
"""

from .roster import GuildMember, Server, Region
from .catalog import (
    ClassCatalog,
    ClassCatalogEntry,
    SpecInfo,
    UNKNOWN_CLASS,
)
from .ranking import (
    RankingResult,
    BestPerformance,
    round_score,
    UNKNOWN_SPEC,
    NOT_FETCHED_SPEC,
    DEFAULT_PROGRESS,
)
from .entry import LeaderboardEntry
from .summary import LeaderboardSummary, BossSummary

__all__ = [
    "GuildMember",
    "Server",
    "Region",
    "ClassCatalog",
    "ClassCatalogEntry",
    "SpecInfo",
    "UNKNOWN_CLASS",
    "RankingResult",
    "BestPerformance",
    "round_score",
    "UNKNOWN_SPEC",
    "NOT_FETCHED_SPEC",
    "DEFAULT_PROGRESS",
    "LeaderboardEntry",
    "LeaderboardSummary",
    "BossSummary",
]
