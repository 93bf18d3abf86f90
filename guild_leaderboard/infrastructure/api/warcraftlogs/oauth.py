"""
Warcraft Logs OAuth2 Service

Client-credentials token provider for the Warcraft Logs API.
"""

import logging
from typing import Dict, Any, Optional
from datetime import datetime, timedelta

import httpx

from ....core.exceptions import AuthenticationError, MissingCredentialsError
from ....core.protocols import OAuthProtocol

logger = logging.getLogger(__name__)


class WarcraftLogsOAuthService(OAuthProtocol):
    """Warcraft Logs OAuth2 service implementation."""

    TOKEN_URL = "https://www.warcraftlogs.com/oauth/token"

    def __init__(
        self,
        client_id: Optional[str],
        client_secret: Optional[str],
        token_url: str = TOKEN_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize OAuth service.

        Args:
            client_id: Warcraft Logs API client ID
            client_secret: Warcraft Logs API client secret
            token_url: Token endpoint
            timeout: Token request timeout in seconds
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.token_url = token_url
        self.timeout = timeout
        self.transport = transport

        self._token_cache: Optional[Dict[str, Any]] = None
        self._token_expires: Optional[datetime] = None

    def _check_credentials(self) -> None:
        missing = []
        if not self.client_id:
            missing.append("WARCRAFT_LOGS_CLIENT_ID")
        if not self.client_secret:
            missing.append("WARCRAFT_LOGS_CLIENT_SECRET")

        if missing:
            logger.error("Missing Warcraft Logs API credentials")
            raise MissingCredentialsError(missing)

    async def get_access_token(self) -> str:
        """
        Get OAuth2 access token.

        Returns:
            Bearer token string

        Raises:
            AuthenticationError: Credentials missing, rejected, or the token
                endpoint could not be reached
        """
        self._check_credentials()

        if self._token_cache and self._token_expires:
            if datetime.now() < self._token_expires:
                logger.debug("Using cached OAuth token")
                return self._token_cache["access_token"]

        logger.info("Fetching new OAuth token")

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(
                    self.token_url,
                    data={
                        "grant_type": "client_credentials"
                    },
                    auth=(self.client_id, self.client_secret),
                    timeout=self.timeout
                )
        except httpx.RequestError as e:
            raise AuthenticationError(
                f"Token endpoint unreachable: {e}",
                details={"token_url": self.token_url},
                original_exception=e
            )

        if response.status_code != 200:
            raise AuthenticationError(
                f"Failed to get access token: {response.status_code} - {response.text}",
                details={"status_code": response.status_code}
            )

        try:
            token_data = response.json()
            access_token = token_data["access_token"]
        except (ValueError, KeyError, TypeError) as e:
            raise AuthenticationError(
                "Token endpoint returned no access token",
                details={"status_code": response.status_code},
                original_exception=e
            )

        self._token_cache = token_data
        expires_in = token_data.get("expires_in", 3600)
        # Set expiration with 5 minute buffer
        self._token_expires = datetime.now() + timedelta(
            seconds=max(expires_in - 300, 0)
        )

        logger.info(f"OAuth token obtained, expires in {expires_in} seconds")

        return access_token

    def clear_cache(self) -> None:
        """Clear cached token."""
        self._token_cache = None
        self._token_expires = None
        logger.debug("OAuth cache cleared")
