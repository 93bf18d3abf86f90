"""Upstream payload builders and a GraphQL stub transport for the tests."""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Optional

import httpx

from guild_leaderboard.core.config import (
    CacheConfig,
    FetchConfig,
    GuildConfig,
    ServerConfig,
    Settings,
    WarcraftLogsConfig,
)

TOKEN_URL = "https://www.warcraftlogs.com/oauth/token"
API_URL = "https://www.warcraftlogs.com/api/v2/client"

GAME_CLASSES = [
    {
        "id": 8,
        "name": "Mage",
        "slug": "mage",
        "specs": [
            {"id": 62, "name": "Arcane", "slug": "arcane"},
            {"id": 63, "name": "Fire", "slug": "fire"},
            {"id": 64, "name": "Frost", "slug": "frost"},
        ],
    },
    {
        "id": 11,
        "name": "Warrior",
        "slug": "warrior",
        "specs": [
            {"id": 71, "name": "Arms", "slug": "arms"},
            {"id": 73, "name": "Protection", "slug": "protection"},
        ],
    },
    {
        "id": 3,
        "name": "Death Knight",
        "slug": "death-knight",
        "specs": [
            {"id": 250, "name": "Blood", "slug": "blood"},
        ],
    },
]


def make_settings(**fetch_overrides: Any) -> Settings:
    """Settings with credentials and no inter-batch pause."""
    fetch = {"BATCH_DELAY_MS": 0}
    fetch.update(fetch_overrides)
    return Settings(
        guild=GuildConfig(
            GUILD_NAME="Test Guild",
            REALM_NAME="Area 52",
            REGION="us",
        ),
        warcraftlogs=WarcraftLogsConfig(
            WARCRAFT_LOGS_CLIENT_ID="client-id",
            WARCRAFT_LOGS_CLIENT_SECRET="client-secret",
            API_MAX_RETRIES=1,
        ),
        fetch=FetchConfig(**fetch),
        cache=CacheConfig(CACHE_TTL_MINUTES=30),
        server=ServerConfig(),
    )


def roster_member(
    member_id: int,
    name: str,
    class_id: int = 8,
    hidden: bool = False,
    region: Optional[str] = "us",
) -> Dict[str, Any]:
    """Raw member object as the roster query returns it."""
    server: Dict[str, Any] = {"slug": "area-52", "name": "Area 52"}
    if region is not None:
        server["region"] = {"slug": region}
    return {
        "id": member_id,
        "name": name,
        "classID": class_id,
        "hidden": hidden,
        "server": server,
    }


def zone_rankings(
    average: float,
    spec: Optional[str] = "Frost",
    spec_id: Optional[int] = 64,
    kills: int = 7,
    bosses: int = 9,
    encounters: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    """A ``zoneRankings`` object."""
    return {
        "bestPerformanceAverage": average,
        "spec": spec,
        "specID": spec_id,
        "totalKills": kills,
        "totalBosses": bosses,
        "rankings": encounters or [],
    }


def encounter(boss: str, percent: Optional[float], report: str = "r1", fight: int = 1) -> Dict[str, Any]:
    return {
        "encounter": {"name": boss},
        "rankPercent": percent,
        "reportID": report,
        "fightID": fight,
    }


class GraphQLStub:
    """
    Routes GraphQL requests by operation name.

    ``characters`` maps a character name to its ``character`` object, or to
    an exception that the transport raises for that character.
    """

    def __init__(
        self,
        members: Optional[List[Dict[str, Any]]] = None,
        classes: Optional[List[Dict[str, Any]]] = None,
        characters: Optional[Dict[str, Any]] = None,
        guild_found: bool = True,
        roster_errors: Optional[List[Dict[str, Any]]] = None,
        catalog_status: int = 200,
    ):
        self.members = members or []
        self.classes = GAME_CLASSES if classes is None else classes
        self.characters = characters or {}
        self.guild_found = guild_found
        self.roster_errors = roster_errors
        self.catalog_status = catalog_status
        self.requests: List[Dict[str, Any]] = []

    def operations(self, name: str) -> List[Dict[str, Any]]:
        return [body for body in self.requests if f"query {name}" in body["query"]]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.requests.append(body)
        query = body["query"]

        if "query GuildRoster" in query:
            if self.roster_errors:
                return httpx.Response(200, json={"errors": self.roster_errors, "data": None})
            guild = {"id": 1, "name": "Test Guild", "members": {"data": self.members}}
            return httpx.Response(
                200,
                json={"data": {"guildData": {"guild": guild if self.guild_found else None}}}
            )

        if "query GameClasses" in query:
            if self.catalog_status != 200:
                return httpx.Response(self.catalog_status, text="upstream down")
            return httpx.Response(200, json={"data": {"gameData": {"classes": self.classes}}})

        if "query CharacterRankings" in query:
            name = body["variables"]["name"]
            character = self.characters.get(name)
            if isinstance(character, Exception):
                raise character
            return httpx.Response(200, json={"data": {"characterData": {"character": character}}})

        return httpx.Response(400, json={"errors": [{"message": "unknown operation"}]})


def token_handler(
    status: int = 200,
    payload: Optional[Dict[str, Any]] = None,
    calls: Optional[List[httpx.Request]] = None,
) -> Callable[[httpx.Request], httpx.Response]:
    """Token endpoint handler recording each request into ``calls``."""

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        if status != 200:
            return httpx.Response(status, json={"error": "invalid_client"})
        return httpx.Response(
            200,
            json=payload if payload is not None else {
                "access_token": "test-token",
                "token_type": "Bearer",
                "expires_in": 3600,
            },
        )

    return handler
