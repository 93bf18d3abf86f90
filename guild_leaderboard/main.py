"""
Guild Leaderboard - Server entry point
"""

import logging

import uvicorn

from .core.config import ConfigLoader
from .presentation.api import create_app

logger = logging.getLogger(__name__)

app = create_app()


def run():
    """Serve the application with uvicorn."""
    settings = ConfigLoader.load_config()
    if not ConfigLoader.validate_config():
        logger.warning("Starting without a usable Warcraft Logs configuration")

    uvicorn.run(
        "guild_leaderboard.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.server.reload
    )


if __name__ == "__main__":
    run()
