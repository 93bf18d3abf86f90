"""
API Client Protocol Definition

Defines the upstream queries the leaderboard pipeline depends on.
"""

from typing import Protocol, List, runtime_checkable

from ...domain.leaderboard.models import ClassCatalog, GuildMember, RankingResult


@runtime_checkable
class LeaderboardAPIProtocol(Protocol):
    """Protocol for the combat-analytics API."""

    async def fetch_guild_roster(
        self,
        token: str,
        guild_name: str,
        realm_slug: str,
        region: str
    ) -> List[GuildMember]:
        """
        Fetch every member of a guild.

        Raises:
            GuildNotFoundError: No guild at these coordinates
            UpstreamProtocolError: API-level error
            NetworkError: Transport failure
        """
        ...

    async def fetch_class_catalog(self, token: str) -> ClassCatalog:
        """Fetch the static class/spec catalog."""
        ...

    async def fetch_character_rankings(
        self,
        token: str,
        member: GuildMember,
        region: str,
        zone_id: int,
        difficulty: int
    ) -> RankingResult:
        """
        Fetch zone rankings for one character.

        Undecodable ranking payloads come back as an empty result; transport
        and API-level failures raise.
        """
        ...

    async def close(self) -> None:
        """Release the underlying HTTP client."""
        ...
