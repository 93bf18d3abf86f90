"""
Base API Client

Base implementation for API clients with common functionality.
"""

import logging
from typing import Optional, Dict, Any
from abc import ABC, abstractmethod

import httpx
from tenacity import (
    AsyncRetrying,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type
)

from ...core.exceptions import NetworkError

logger = logging.getLogger(__name__)

# Transient transport failures worth another attempt
RETRYABLE_EXCEPTIONS = (httpx.TimeoutException, httpx.NetworkError)


class BaseAPIClient(ABC):
    """Base API client with common functionality."""

    def __init__(
        self,
        base_url: str,
        timeout: int = 30,
        max_retries: int = 3,
        retry_wait_min: float = 1.0,
        retry_wait_max: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize base API client.

        Args:
            base_url: Base URL for API
            timeout: Request timeout in seconds
            max_retries: Attempts per request, first one included
            retry_wait_min: Minimum backoff between attempts in seconds
            retry_wait_max: Maximum backoff between attempts in seconds
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_wait_min = retry_wait_min
        self.retry_wait_max = retry_wait_max
        self.transport = transport

        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        """Enter async context."""
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context."""
        await self.close()

    async def initialize(self) -> None:
        """Initialize HTTP client."""
        if not self._client:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                headers=self._get_default_headers(),
                transport=self.transport
            )
            logger.info(f"API client initialized for {self.base_url}")

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("API client closed")

    @abstractmethod
    def _get_default_headers(self) -> Dict[str, str]:
        """Get default headers for requests."""
        pass

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        **kwargs
    ) -> httpx.Response:
        """
        Make HTTP request with retries on transient transport errors.

        Args:
            method: HTTP method
            endpoint: API endpoint, absolute or relative to base_url
            **kwargs: Additional request arguments

        Returns:
            HTTP response, status already checked

        Raises:
            NetworkError: Request could not be completed, retries included
            httpx.HTTPStatusError: Non-2xx response
        """
        if not self._client:
            await self.initialize()

        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.max_retries),
            wait=wait_exponential(
                multiplier=self.retry_wait_min,
                min=self.retry_wait_min,
                max=self.retry_wait_max
            ),
            retry=retry_if_exception_type(RETRYABLE_EXCEPTIONS),
            reraise=True
        )

        try:
            async for attempt in retrying:
                with attempt:
                    return await self._execute_request(method, endpoint, **kwargs)
        except httpx.RequestError as e:
            logger.error(f"{method} {endpoint} failed after retries: {e}")
            raise NetworkError(
                f"Network error calling {endpoint}: {e}",
                endpoint=endpoint,
                original_exception=e
            )

    async def _execute_request(
        self,
        method: str,
        endpoint: str,
        **kwargs
    ) -> httpx.Response:
        """Execute the actual HTTP request."""
        if endpoint.startswith('http'):
            url = endpoint
        elif endpoint:
            url = f"{self.base_url}/{endpoint.lstrip('/')}"
        else:
            url = self.base_url

        logger.debug(f"{method} {url}")

        response = await self._client.request(
            method=method,
            url=url,
            **kwargs
        )

        response.raise_for_status()
        return response

    async def post(
        self,
        endpoint: str,
        data: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> Dict[str, Any]:
        """Make POST request."""
        response = await self._make_request(
            "POST",
            endpoint,
            data=data,
            json=json,
            headers=headers
        )
        return response.json()
