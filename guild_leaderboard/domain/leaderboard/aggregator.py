"""
Leaderboard aggregator: roster + class catalog + rankings -> ranked entries
"""

import logging
import re
from typing import List, Mapping, Sequence, Tuple

from .models import (
    ClassCatalog,
    GuildMember,
    LeaderboardEntry,
    RankingResult,
    SpecInfo,
)

logger = logging.getLogger(__name__)


def spec_slug(spec_name: str) -> str:
    """Lower-case a spec name and hyphenate whitespace runs."""
    return re.sub(r"\s+", "-", spec_name.lower())


class LeaderboardAggregator:
    """Pure merge of upstream data into a sorted leaderboard"""

    @staticmethod
    def visible_members(roster: Sequence[GuildMember]) -> List[GuildMember]:
        """Roster order, hidden members removed"""
        return [member for member in roster if not member.hidden]

    @staticmethod
    def split_by_cap(
        members: Sequence[GuildMember],
        max_characters: int
    ) -> Tuple[List[GuildMember], List[GuildMember]]:
        """Split into (members to query, members left as placeholders)"""
        return list(members[:max_characters]), list(members[max_characters:])

    @staticmethod
    def resolve_spec(
        ranking: RankingResult,
        catalog_specs: Mapping[int, SpecInfo]
    ) -> SpecInfo:
        """
        Prefer the catalog's spec when the ranking carries a known spec id,
        otherwise derive name and slug from the raw spec string.
        """
        if ranking.spec_id is not None and ranking.spec_id in catalog_specs:
            return catalog_specs[ranking.spec_id]
        return SpecInfo(name=ranking.spec, slug=spec_slug(ranking.spec))

    @staticmethod
    def build_entry(
        member: GuildMember,
        catalog: ClassCatalog,
        ranking: RankingResult
    ) -> LeaderboardEntry:
        class_info = catalog.lookup(member.class_id)
        spec_info = LeaderboardAggregator.resolve_spec(ranking, class_info.specs)

        return LeaderboardEntry(
            id=member.id,
            name=member.name,
            class_name=class_info.name,
            class_id=member.class_id,
            class_slug=class_info.slug,
            spec=spec_info.name,
            spec_slug=spec_info.slug,
            score=ranking.rounded_score,
            item_level=ranking.item_level,
            server=member.server.name,
            progress=ranking.progress,
            boss_scores=dict(ranking.boss_scores),
            best_performances=ranking.top_performances(),
        )

    @staticmethod
    def aggregate(
        roster: Sequence[GuildMember],
        catalog: ClassCatalog,
        rankings: Mapping[int, RankingResult]
    ) -> List[LeaderboardEntry]:
        """
        Build the ranked leaderboard.

        Members without a ranking result (beyond the processing cap) are kept
        as "Not fetched" placeholders so nobody silently drops off the board.

        Args:
            roster: Full guild roster, hidden members included
            catalog: Class/spec catalog, possibly empty
            rankings: Ranking results keyed by member id

        Returns:
            Entries sorted by score, descending; ties keep roster order
        """
        entries = []
        for member in LeaderboardAggregator.visible_members(roster):
            ranking = rankings.get(member.id)
            if ranking is None:
                ranking = RankingResult.not_fetched()
            entries.append(
                LeaderboardAggregator.build_entry(member, catalog, ranking)
            )

        hidden = len(roster) - len(entries)
        if hidden:
            logger.debug(f"Excluded {hidden} hidden members")

        return sorted(entries, key=lambda entry: entry.score, reverse=True)
