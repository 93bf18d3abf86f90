"""
Leaderboard Service

Runs one aggregation pass: token -> roster + catalog -> rankings -> aggregate.
"""

import asyncio
import logging
from typing import List, Optional

from ...core.config import Settings
from ...core.exceptions import LeaderboardError
from ...core.protocols import LeaderboardAPIProtocol, OAuthProtocol
from ...domain.leaderboard import LeaderboardAggregator
from ...domain.leaderboard.models import (
    ClassCatalog,
    GuildMember,
    LeaderboardEntry,
    RankingResult,
)
from ...infrastructure.api.warcraftlogs import BatchRunner
from .mock_data import MockLeaderboardSource

logger = logging.getLogger(__name__)


class LeaderboardService:
    """Builds the guild leaderboard from the Warcraft Logs API."""

    def __init__(
        self,
        oauth_service: OAuthProtocol,
        api_client: LeaderboardAPIProtocol,
        batch_runner: BatchRunner,
        settings: Settings,
        mock_source: Optional[MockLeaderboardSource] = None
    ):
        self.oauth_service = oauth_service
        self.api_client = api_client
        self.batch_runner = batch_runner
        self.settings = settings
        self.mock_source = mock_source or MockLeaderboardSource()

    async def build_leaderboard(self) -> List[LeaderboardEntry]:
        """
        Run a full aggregation pass.

        Returns:
            Entries sorted by score, descending

        Raises:
            AuthenticationError: Token could not be obtained
            GuildNotFoundError: Guild does not exist upstream
            UpstreamProtocolError: Roster query reported errors
            NetworkError: Roster query could not reach the API
        """
        if self.settings.fetch.use_mock_data:
            logger.info("Using mock data")
            return self.mock_source.generate()

        guild = self.settings.guild
        fetch = self.settings.fetch

        token = await self.oauth_service.get_access_token()

        logger.info(f"Using raid zone ID: {fetch.zone_id}, difficulty: {fetch.difficulty}")

        roster, catalog = await asyncio.gather(
            self.api_client.fetch_guild_roster(
                token,
                guild.guild_name,
                guild.realm_slug,
                guild.region
            ),
            self._fetch_catalog(token)
        )

        visible = LeaderboardAggregator.visible_members(roster)
        to_fetch, remaining = LeaderboardAggregator.split_by_cap(
            visible,
            fetch.max_characters
        )
        logger.info(
            f"Processing {len(to_fetch)} out of {len(visible)} members "
            f"({len(remaining)} left unfetched)"
        )

        results = await self.batch_runner.run(
            to_fetch,
            lambda member: self._fetch_rankings(token, member)
        )
        rankings = {
            member.id: result
            for member, result in zip(to_fetch, results)
        }

        return LeaderboardAggregator.aggregate(roster, catalog, rankings)

    async def _fetch_catalog(self, token: str) -> ClassCatalog:
        """Class catalog, or an empty one if the query fails."""
        try:
            return await self.api_client.fetch_class_catalog(token)
        except LeaderboardError as e:
            logger.warning(f"Class catalog unavailable, using Unknown classes: {e}")
            return ClassCatalog.empty()
        except Exception:
            logger.exception("Unexpected error loading class catalog, using Unknown classes")
            return ClassCatalog.empty()

    async def _fetch_rankings(self, token: str, member: GuildMember) -> RankingResult:
        """Rankings for one member; failures degrade to an empty result."""
        try:
            return await self.api_client.fetch_character_rankings(
                token,
                member,
                self.settings.guild.region,
                self.settings.fetch.zone_id,
                self.settings.fetch.difficulty
            )
        except LeaderboardError as e:
            logger.error(f"Failed to get rankings for {member.name}: {e}")
            return RankingResult.empty()
        except Exception:
            logger.exception(f"Unexpected error getting rankings for {member.name}")
            return RankingResult.empty()
