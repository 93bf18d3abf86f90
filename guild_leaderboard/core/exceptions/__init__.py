"""
Core Exceptions

Base exception classes for the application.
"""

from .base import (
    LeaderboardError,
    AuthenticationError,
    MissingCredentialsError,
    GuildNotFoundError,
    UpstreamProtocolError,
    RankingParseError,
    NetworkError,
    ConfigurationError,
)

__all__ = [
    "LeaderboardError",
    "AuthenticationError",
    "MissingCredentialsError",
    "GuildNotFoundError",
    "UpstreamProtocolError",
    "RankingParseError",
    "NetworkError",
    "ConfigurationError",
]
