"""
Leaderboard Entry Model

One decorated row of the guild leaderboard.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field

from .ranking import BestPerformance


class LeaderboardEntry(BaseModel):
    """Guild member joined with class catalog and ranking data."""
    id: int
    name: str
    class_name: str = Field(alias="class")
    class_id: int = Field(alias="classId")
    class_slug: str = Field(alias="classSlug")
    spec: str
    spec_slug: str = Field(alias="specSlug")
    score: int = Field(ge=0)
    item_level: float = Field(default=0.0, alias="itemLevel")
    server: str
    progress: str
    boss_scores: Dict[str, int] = Field(default_factory=dict, alias="bossScores")
    best_performances: List[BestPerformance] = Field(
        default_factory=list,
        alias="bestPerformances"
    )

    class Config:
        populate_by_name = True
        frozen = True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase shape the front end consumes."""
        return self.model_dump(by_alias=True)
