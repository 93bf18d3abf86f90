"""
OAuth Protocol Definition

Protocol for OAuth2 token providers.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class OAuthProtocol(Protocol):
    """Protocol for OAuth2 client-credentials authentication."""

    async def get_access_token(self) -> str:
        """
        Get a bearer token.

        Returns:
            Access token string

        Raises:
            AuthenticationError: Credentials missing or rejected
        """
        ...

    def clear_cache(self) -> None:
        """Forget any cached token."""
        ...
