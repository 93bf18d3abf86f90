"""
Ranking Models

Per-character ranking data after decoding.
"""

import math
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


UNKNOWN_SPEC = "Unknown"
NOT_FETCHED_SPEC = "Not fetched"
DEFAULT_PROGRESS = "0/9"
TOP_PERFORMANCES = 3


def round_score(value: Optional[float]) -> int:
    """Round half up, never below zero; NaN and infinities count as 0."""
    if not value or not math.isfinite(value) or value < 0:
        return 0
    return int(math.floor(value + 0.5))


class BestPerformance(BaseModel):
    """A single encounter parse."""
    boss: str
    score: int
    report_id: Optional[str] = Field(default=None, alias="reportID")
    fight_id: Optional[int] = Field(default=None, alias="fightID")

    class Config:
        populate_by_name = True
        frozen = True


class RankingResult(BaseModel):
    """Decoded zone rankings for one character."""
    score: float = 0.0
    spec: str = UNKNOWN_SPEC
    spec_id: Optional[int] = None
    total_kills: Optional[int] = None
    total_bosses: Optional[int] = None
    boss_scores: Dict[str, int] = Field(default_factory=dict)
    best_performances: List[BestPerformance] = Field(default_factory=list)
    item_level: float = 0.0

    @classmethod
    def empty(cls) -> "RankingResult":
        """No usable ranking data for the character."""
        return cls()

    @classmethod
    def not_fetched(cls) -> "RankingResult":
        """Placeholder for members beyond the processing cap."""
        return cls(spec=NOT_FETCHED_SPEC)

    @property
    def rounded_score(self) -> int:
        return round_score(self.score)

    @property
    def progress(self) -> str:
        if self.total_kills is None or self.total_bosses is None:
            return DEFAULT_PROGRESS
        return f"{self.total_kills}/{self.total_bosses}"

    def top_performances(self, limit: int = TOP_PERFORMANCES) -> List[BestPerformance]:
        # equal scores keep encounter order
        return sorted(
            self.best_performances,
            key=lambda p: p.score,
            reverse=True
        )[:limit]
