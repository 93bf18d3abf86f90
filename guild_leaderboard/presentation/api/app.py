"""
Guild Leaderboard - FastAPI Application
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ...core.container import Container, create_container, shutdown_container
from ...core.exceptions import LeaderboardError
from ...utils.logging_utils import setup_logging
from .routes import router

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        container: Pre-configured container; a new one reading the
            environment is created when omitted

    Returns:
        Configured application
    """
    container = container or create_container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager"""
        settings = container.settings()
        setup_logging(settings.log_level)

        logger.info(f"Starting {settings.app_name} v{settings.app_version}...")
        if settings.fetch.use_mock_data:
            logger.info("Mock data mode enabled, Warcraft Logs will not be queried")
        elif not settings.warcraftlogs.has_credentials:
            logger.warning(
                "Warcraft Logs credentials are not configured, "
                "leaderboard requests will fail"
            )

        yield

        logger.info(f"Shutting down {settings.app_name}...")
        await shutdown_container(container)

    app = FastAPI(
        title="Guild Leaderboard",
        description="Warcraft Logs raid parse leaderboard for a World of Warcraft guild",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.container = container

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request monitoring middleware
    @app.middleware("http")
    async def monitor_requests(request: Request, call_next):
        start_time = time.time()

        response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(
            f"{request.method} {request.url.path} - "
            f"{response.status_code} - {process_time:.3f}s"
        )

        return response

    @app.exception_handler(LeaderboardError)
    async def leaderboard_error_handler(request: Request, exc: LeaderboardError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    app.include_router(router)

    return app
