"""
Summary figures and filters over a computed leaderboard
"""

from collections import defaultdict
from typing import Dict, List, Optional, Sequence

from .models import BossSummary, LeaderboardEntry, LeaderboardSummary, round_score


class LeaderboardSummaryService:
    """Guild-wide statistics shown next to the leaderboard table"""

    @staticmethod
    def filter_entries(
        entries: Sequence[LeaderboardEntry],
        search: Optional[str] = None,
        class_name: Optional[str] = None
    ) -> List[LeaderboardEntry]:
        """
        Filter entries by a name/spec search term and an exact class name.

        Empty filters match everything; input order is preserved.
        """
        term = (search or "").lower()

        def matches(entry: LeaderboardEntry) -> bool:
            if term and term not in entry.name.lower() and term not in entry.spec.lower():
                return False
            if class_name and entry.class_name != class_name:
                return False
            return True

        return [entry for entry in entries if matches(entry)]

    @staticmethod
    def boss_summary(entries: Sequence[LeaderboardEntry]) -> Dict[str, BossSummary]:
        """Average non-zero boss score per encounter, best average first"""
        scores: Dict[str, List[int]] = defaultdict(list)
        for entry in entries:
            for boss, score in entry.boss_scores.items():
                if score:
                    scores[boss].append(score)

        summary = {
            boss: BossSummary(
                average=round_score(sum(values) / len(values)),
                count=len(values)
            )
            for boss, values in scores.items()
        }
        ordered = sorted(summary, key=lambda boss: summary[boss].average, reverse=True)
        return {boss: summary[boss] for boss in ordered}

    @staticmethod
    def summarize(entries: Sequence[LeaderboardEntry]) -> LeaderboardSummary:
        if not entries:
            return LeaderboardSummary(
                member_count=0,
                average_score=0,
                average_item_level=0,
            )

        average_score = round_score(
            sum(entry.score for entry in entries) / len(entries)
        )

        item_levels = [entry.item_level for entry in entries if entry.item_level]
        average_item_level = (
            round_score(sum(item_levels) / len(item_levels)) if item_levels else 0
        )

        return LeaderboardSummary(
            member_count=len(entries),
            average_score=average_score,
            average_item_level=average_item_level,
            boss_summary=LeaderboardSummaryService.boss_summary(entries),
            classes=sorted({entry.class_name for entry in entries}),
        )
