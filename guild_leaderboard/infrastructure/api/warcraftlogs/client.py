"""
Warcraft Logs API Client

GraphQL client for the guild roster, class catalog and character rankings.
"""

import logging
from typing import Optional, Dict, Any, List

import httpx
from pydantic import ValidationError

from ....core.exceptions import (
    AuthenticationError,
    GuildNotFoundError,
    UpstreamProtocolError,
)
from ....core.protocols import LeaderboardAPIProtocol
from ....domain.leaderboard.models import ClassCatalog, GuildMember, RankingResult
from ..base_client import BaseAPIClient
from .models import decode_character_rankings
from .queries import (
    GUILD_ROSTER_QUERY,
    GAME_CLASSES_QUERY,
    CHARACTER_RANKINGS_QUERY,
)

logger = logging.getLogger(__name__)


class WarcraftLogsClient(BaseAPIClient, LeaderboardAPIProtocol):
    """Warcraft Logs v2 client API."""

    API_URL = "https://www.warcraftlogs.com/api/v2/client"

    def __init__(
        self,
        api_url: str = API_URL,
        **kwargs
    ):
        """
        Initialize Warcraft Logs client.

        Args:
            api_url: GraphQL endpoint
            **kwargs: Additional arguments for base client
        """
        super().__init__(base_url=api_url, **kwargs)

    def _get_default_headers(self) -> Dict[str, str]:
        """Get default headers for requests."""
        return {
            "Accept": "application/json",
            "Content-Type": "application/json"
        }

    async def query(
        self,
        token: str,
        query: str,
        variables: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Run a GraphQL query.

        Args:
            token: Bearer token
            query: GraphQL document
            variables: Query variables

        Returns:
            The ``data`` object of the response

        Raises:
            UpstreamProtocolError: GraphQL errors, non-2xx status or non-JSON body
            AuthenticationError: The API rejected the token
            NetworkError: Transport failure after retries
        """
        body: Dict[str, Any] = {"query": query}
        if variables:
            body["variables"] = variables

        try:
            payload = await self.post(
                "",
                json=body,
                headers={"Authorization": f"Bearer {token}"}
            )
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status == 401:
                raise AuthenticationError(
                    "Warcraft Logs rejected the access token",
                    details={"status_code": status}
                )
            raise UpstreamProtocolError(
                f"Warcraft Logs API returned {status}",
                status_code=status,
                details={"body": e.response.text[:500]}
            )
        except ValueError as e:
            raise UpstreamProtocolError(f"Warcraft Logs API returned invalid JSON: {e}")

        if not isinstance(payload, dict):
            raise UpstreamProtocolError("Warcraft Logs API returned an unexpected body")

        if payload.get("errors"):
            logger.error(f"GraphQL errors: {payload['errors']}")
            raise UpstreamProtocolError(
                "Warcraft Logs API reported errors",
                errors=payload["errors"]
            )

        return payload.get("data") or {}

    async def fetch_guild_roster(
        self,
        token: str,
        guild_name: str,
        realm_slug: str,
        region: str
    ) -> List[GuildMember]:
        """Get every member of the guild, hidden ones included."""
        logger.info(f"Fetching data for guild: {guild_name} on {realm_slug}-{region}")

        data = await self.query(
            token,
            GUILD_ROSTER_QUERY,
            {
                "guildName": guild_name,
                "serverRegion": region,
                "serverSlug": realm_slug,
            }
        )

        guild = (data.get("guildData") or {}).get("guild")
        if not guild:
            raise GuildNotFoundError(guild_name, realm_slug, region)

        raw_members = (guild.get("members") or {}).get("data") or []
        try:
            members = [GuildMember.model_validate(raw) for raw in raw_members]
        except ValidationError as e:
            raise UpstreamProtocolError(f"Unexpected roster shape: {e}")

        logger.info(f"Found {len(members)} guild members in API response")
        return members

    async def fetch_class_catalog(self, token: str) -> ClassCatalog:
        """Get the static class/spec catalog."""
        data = await self.query(token, GAME_CLASSES_QUERY)

        game_classes = (data.get("gameData") or {}).get("classes") or []
        try:
            catalog = ClassCatalog.from_game_data(game_classes)
        except (AttributeError, KeyError, TypeError, ValidationError) as e:
            raise UpstreamProtocolError(f"Unexpected class catalog shape: {e}")

        logger.debug(f"Loaded {len(catalog)} classes")
        return catalog

    async def fetch_character_rankings(
        self,
        token: str,
        member: GuildMember,
        region: str,
        zone_id: int,
        difficulty: int
    ) -> RankingResult:
        """Get zone rankings, spec and item level for one character."""
        data = await self.query(
            token,
            CHARACTER_RANKINGS_QUERY,
            {
                "name": member.name,
                "serverSlug": member.server.slug,
                "serverRegion": member.region_slug(region),
                "zoneID": zone_id,
                "difficulty": difficulty,
            }
        )

        character = (data.get("characterData") or {}).get("character")
        return decode_character_rankings(character, member.name)
