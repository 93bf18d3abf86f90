"""
Dependency Injection Container

Central container for managing application dependencies.
"""

import logging
from typing import Optional

from dependency_injector import containers, providers

from .config import Settings, ConfigLoader
from ..application.services import LeaderboardService, MockLeaderboardSource
from ..infrastructure.api.warcraftlogs import (
    BatchRunner,
    InterBatchDelayPolicy,
    WarcraftLogsClient,
    WarcraftLogsOAuthService,
)
from ..infrastructure.cache import ResultCache

logger = logging.getLogger(__name__)


class Container(containers.DeclarativeContainer):
    """Main DI container for the application."""

    settings = providers.Singleton(
        ConfigLoader.load_config
    )

    # Infrastructure - Warcraft Logs API
    oauth_service = providers.Singleton(
        WarcraftLogsOAuthService,
        client_id=settings.provided.warcraftlogs.client_id,
        client_secret=settings.provided.warcraftlogs.client_secret,
        token_url=settings.provided.warcraftlogs.oauth_url,
    )

    api_client = providers.Singleton(
        WarcraftLogsClient,
        api_url=settings.provided.warcraftlogs.api_url,
        timeout=settings.provided.warcraftlogs.timeout,
        max_retries=settings.provided.warcraftlogs.max_retries,
    )

    # Infrastructure - throttling
    rate_limit_policy = providers.Singleton(
        InterBatchDelayPolicy,
        delay_seconds=settings.provided.fetch.batch_delay_seconds,
    )

    batch_runner = providers.Singleton(
        BatchRunner,
        batch_size=settings.provided.fetch.batch_size,
        policy=rate_limit_policy,
    )

    # Services
    mock_source = providers.Singleton(
        MockLeaderboardSource
    )

    leaderboard_service = providers.Singleton(
        LeaderboardService,
        oauth_service=oauth_service,
        api_client=api_client,
        batch_runner=batch_runner,
        settings=settings,
        mock_source=mock_source,
    )

    # Process-wide leaderboard cache
    result_cache = providers.Singleton(
        ResultCache,
        loader=leaderboard_service.provided.build_leaderboard,
        ttl_seconds=settings.provided.cache.ttl_seconds,
    )


def create_container(settings: Optional[Settings] = None) -> Container:
    """
    Create a container, optionally pinned to explicit settings.

    Args:
        settings: Settings to use instead of loading from the environment

    Returns:
        New container
    """
    container = Container()
    if settings is not None:
        container.settings.override(providers.Object(settings))
    return container


async def shutdown_container(container: Container) -> None:
    """Close network resources held by the container."""
    await container.api_client().close()
    logger.info("Container shutdown complete")
