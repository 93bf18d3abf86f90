"""
Centralized logging utilities for consistent logging configuration across the application
"""

import logging
from typing import Optional, Union

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Union[int, str] = logging.INFO, format_string: Optional[str] = None):
    """
    Configure application-wide logging

    Args:
        level: Logging level or level name (default: INFO)
        format_string: Custom format string (optional)
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(
        level=level,
        format=format_string or DEFAULT_FORMAT,
        handlers=[
            logging.StreamHandler(),
        ],
        force=True  # Override any existing configuration
    )

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
