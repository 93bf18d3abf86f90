"""
Application Settings

Configuration classes using Pydantic for validation.
"""

import re
from typing import Optional

from pydantic import field_validator, Field
from pydantic_settings import BaseSettings


VALID_REGIONS = {"us", "eu", "kr", "tw", "cn"}


def slugify_realm(realm_name: str) -> str:
    """Convert a realm display name to the slug the API expects."""
    return re.sub(r"\s+", "-", realm_name).lower()


class GuildConfig(BaseSettings):
    """Which guild the leaderboard is built for."""

    guild_name: str = Field(
        default="Your Guild Name",
        alias="GUILD_NAME",
        description="Guild name as shown in game"
    )
    realm_name: str = Field(
        default="Your Realm",
        alias="REALM_NAME",
        description="Realm display name"
    )
    region: str = Field(
        default="us",
        alias="REGION",
        description="Region slug"
    )

    class Config:
        populate_by_name = True
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"

    @field_validator("region")
    @classmethod
    def validate_region(cls, v):
        """Validate region value."""
        v = v.lower()
        if v not in VALID_REGIONS:
            raise ValueError(
                f"Invalid region: {v}. Must be one of {VALID_REGIONS}"
            )
        return v

    @property
    def realm_slug(self) -> str:
        return slugify_realm(self.realm_name)


class WarcraftLogsConfig(BaseSettings):
    """Warcraft Logs API credentials and transport settings."""

    client_id: Optional[str] = Field(
        default=None,
        alias="WARCRAFT_LOGS_CLIENT_ID",
        description="OAuth client ID"
    )
    client_secret: Optional[str] = Field(
        default=None,
        alias="WARCRAFT_LOGS_CLIENT_SECRET",
        description="OAuth client secret"
    )
    oauth_url: str = Field(default="https://www.warcraftlogs.com/oauth/token")
    api_url: str = Field(default="https://www.warcraftlogs.com/api/v2/client")
    timeout: int = Field(default=30, ge=1, alias="API_TIMEOUT")
    max_retries: int = Field(default=3, ge=1, alias="API_MAX_RETRIES")

    class Config:
        populate_by_name = True
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"

    @property
    def has_credentials(self) -> bool:
        return bool(self.client_id and self.client_secret)


class FetchConfig(BaseSettings):
    """Which rankings to fetch and how hard to hit the API."""

    zone_id: int = Field(
        default=39,
        alias="LATEST_RAID_ZONE_ID",
        description="Raid zone ID"
    )
    difficulty: int = Field(
        default=4,
        alias="RAID_DIFFICULTY",
        description="Raid difficulty ID"
    )
    max_characters: int = Field(
        default=25,
        ge=0,
        alias="MAX_CHARACTERS",
        description="Members that receive live ranking queries"
    )
    batch_size: int = Field(
        default=5,
        ge=1,
        alias="BATCH_SIZE",
        description="Concurrent ranking queries per batch"
    )
    batch_delay_ms: int = Field(
        default=500,
        ge=0,
        alias="BATCH_DELAY_MS",
        description="Pause between batches in milliseconds"
    )
    use_mock_data: bool = Field(
        default=False,
        alias="USE_MOCK_DATA",
        description="Serve generated sample data instead of calling the API"
    )

    class Config:
        populate_by_name = True
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"

    @property
    def batch_delay_seconds(self) -> float:
        return self.batch_delay_ms / 1000


class CacheConfig(BaseSettings):
    """Result cache settings."""

    ttl_minutes: float = Field(
        default=30,
        ge=0,
        alias="CACHE_TTL_MINUTES",
        description="How long a computed leaderboard stays valid"
    )

    class Config:
        populate_by_name = True
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"

    @property
    def ttl_seconds(self) -> float:
        return self.ttl_minutes * 60


class ServerConfig(BaseSettings):
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8000, alias="PORT")
    reload: bool = Field(default=False)

    class Config:
        populate_by_name = True
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


class Settings(BaseSettings):
    """Main application settings."""

    app_name: str = Field(
        default="Guild Leaderboard",
        description="Application name"
    )
    app_version: str = Field(
        default="1.0.0",
        description="Application version"
    )
    env: str = Field(
        default="development",
        description="Environment"
    )
    debug: bool = Field(
        default=False,
        description="Debug mode"
    )
    log_level: str = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Root logging level"
    )

    guild: GuildConfig
    warcraftlogs: WarcraftLogsConfig
    fetch: FetchConfig
    cache: CacheConfig
    server: ServerConfig

    class Config:
        populate_by_name = True
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Ignore extra fields from .env

    def __init__(self, **kwargs):
        # Sub-configs not passed explicitly are read from the environment
        kwargs.setdefault("guild", GuildConfig())
        kwargs.setdefault("warcraftlogs", WarcraftLogsConfig())
        kwargs.setdefault("fetch", FetchConfig())
        kwargs.setdefault("cache", CacheConfig())
        kwargs.setdefault("server", ServerConfig())

        super().__init__(**kwargs)

    def public_config(self) -> dict:
        """Guild coordinates safe to show to viewers."""
        return {
            "guildName": self.guild.guild_name,
            "realmName": self.guild.realm_name,
            "region": self.guild.region,
        }
