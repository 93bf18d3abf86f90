"""
Summary Models

Guild-wide figures computed from a leaderboard.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class BossSummary(BaseModel):
    """Average parse on one encounter across the guild."""
    average: int
    count: int


class LeaderboardSummary(BaseModel):
    """Summary widgets for the leaderboard page."""
    member_count: int = Field(alias="memberCount")
    average_score: int = Field(alias="averageScore")
    average_item_level: int = Field(alias="averageItemLevel")
    boss_summary: Dict[str, BossSummary] = Field(
        default_factory=dict,
        alias="bossSummary"
    )
    classes: List[str] = Field(default_factory=list)

    class Config:
        populate_by_name = True

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
