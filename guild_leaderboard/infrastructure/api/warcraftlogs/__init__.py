"""
Warcraft Logs API Infrastructure

OAuth, GraphQL client, payload decoding and rate limiting.
"""

from .client import WarcraftLogsClient
from .oauth import WarcraftLogsOAuthService
from .rate_limiter import BatchRunner, InterBatchDelayPolicy
from .models import decode_character_rankings, decode_json_scalar

__all__ = [
    # Client
    "WarcraftLogsClient",

    # OAuth
    "WarcraftLogsOAuthService",

    # Rate limiting
    "BatchRunner",
    "InterBatchDelayPolicy",

    # Decoding
    "decode_character_rankings",
    "decode_json_scalar",
]
