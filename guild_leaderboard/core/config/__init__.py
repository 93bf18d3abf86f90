"""
Configuration Management

Centralized configuration for the application.
"""

from .settings import (
    Settings,
    GuildConfig,
    WarcraftLogsConfig,
    FetchConfig,
    CacheConfig,
    ServerConfig,
    slugify_realm,
)
from .loader import ConfigLoader

__all__ = [
    "Settings",
    "GuildConfig",
    "WarcraftLogsConfig",
    "FetchConfig",
    "CacheConfig",
    "ServerConfig",
    "slugify_realm",
    "ConfigLoader",
]
