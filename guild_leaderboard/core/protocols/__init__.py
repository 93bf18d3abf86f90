"""
Core Protocol Definitions

This module defines the interfaces that all implementations must follow.
"""

from .oauth_protocol import OAuthProtocol
from .api_client_protocol import LeaderboardAPIProtocol

__all__ = [
    "OAuthProtocol",
    "LeaderboardAPIProtocol",
]
