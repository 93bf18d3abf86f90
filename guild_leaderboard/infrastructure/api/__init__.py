"""
API Infrastructure

Base API client implementations.
"""

from .base_client import BaseAPIClient
from .warcraftlogs import (
    WarcraftLogsClient,
    WarcraftLogsOAuthService,
    BatchRunner,
    InterBatchDelayPolicy,
)

__all__ = [
    # Base client
    "BaseAPIClient",

    # Warcraft Logs API
    "WarcraftLogsClient",
    "WarcraftLogsOAuthService",
    "BatchRunner",
    "InterBatchDelayPolicy",
]
