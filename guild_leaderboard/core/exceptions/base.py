"""
Base Exception Classes

Core exception hierarchy for the leaderboard pipeline.
"""

from typing import Optional, Dict, Any, List


class LeaderboardError(Exception):
    """Base exception for all application errors."""

    title = "API request failed"
    status_code = 500

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        self.message = message
        self.details = details or {}
        self.original_exception = original_exception
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a response body."""
        return {
            "error": self.title,
            "message": self.message,
            "details": self.details
        }


class AuthenticationError(LeaderboardError):
    """Rejected OAuth credentials or unreachable token endpoint."""

    title = "Authentication failed"


class MissingCredentialsError(AuthenticationError):
    """OAuth client id or secret not configured."""

    title = "Missing API credentials"

    def __init__(self, missing: List[str]):
        super().__init__(
            f"Please configure {' and '.join(missing)} in your environment variables",
            details={"missing": missing}
        )
        self.missing = missing


class GuildNotFoundError(LeaderboardError):
    """The roster query returned no guild for the given coordinates."""

    title = "Guild not found"
    status_code = 404

    def __init__(
        self,
        guild_name: str,
        realm_slug: str,
        region: str,
        details: Optional[Dict[str, Any]] = None
    ):
        message = f'Could not find guild "{guild_name}" on {realm_slug}-{region}'
        super().__init__(message, details)
        self.guild_name = guild_name
        self.realm_slug = realm_slug
        self.region = region

        self.details["guild_name"] = guild_name
        self.details["realm_slug"] = realm_slug
        self.details["region"] = region


class UpstreamProtocolError(LeaderboardError):
    """API-level error reported by the upstream service."""

    title = "GraphQL error"

    def __init__(
        self,
        message: str,
        errors: Optional[List[Any]] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details)
        self.errors = errors or []
        self.upstream_status = status_code

        self.details["errors"] = self.errors
        self.details["upstream_status"] = status_code


class RankingParseError(LeaderboardError):
    """A character's ranking payload could not be decoded."""

    title = "Ranking parse error"

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(message, original_exception=original_exception)
        self.field = field
        self.details["field"] = field


class NetworkError(LeaderboardError):
    """Transport failure while talking to the upstream service."""

    title = "Network error"

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(message, original_exception=original_exception)
        self.endpoint = endpoint
        self.details["endpoint"] = endpoint


class ConfigurationError(LeaderboardError):
    """Configuration-related errors."""

    title = "Configuration error"

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details)
        self.config_key = config_key

        self.details["config_key"] = config_key
