"""
Configuration Loader

Handles loading and validation of configuration.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from ..exceptions import ConfigurationError
from .settings import Settings

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads and manages application configuration."""

    _settings: Optional[Settings] = None

    @classmethod
    def load_config(cls) -> Settings:
        """
        Load configuration from the environment and .env file.

        Returns:
            Loaded settings

        Raises:
            ConfigurationError: If a value fails validation
        """
        if cls._settings is not None:
            return cls._settings

        try:
            cls._settings = Settings()
        except ValidationError as e:
            logger.error(f"Failed to load configuration: {e}")
            errors = e.errors()
            config_key = ".".join(str(p) for p in errors[0]["loc"]) if errors else None
            raise ConfigurationError(
                f"Invalid configuration: {e}",
                config_key=config_key
            )

        logger.info(
            f"Configuration loaded successfully "
            f"(debug={cls._settings.debug})"
        )
        cls._log_config_info()

        return cls._settings

    @classmethod
    def reload_config(cls) -> Settings:
        """Drop the loaded settings and read them again."""
        cls._settings = None
        return cls.load_config()

    @classmethod
    def _log_config_info(cls) -> None:
        """Log non-sensitive configuration information."""
        if not cls._settings:
            return

        settings = cls._settings
        logger.info(f"App: {settings.app_name} v{settings.app_version}")
        logger.info(
            f"Guild: {settings.guild.guild_name} on "
            f"{settings.guild.realm_slug}-{settings.guild.region}"
        )
        logger.info(
            f"Raid zone ID: {settings.fetch.zone_id}, "
            f"difficulty: {settings.fetch.difficulty}"
        )
        logger.info(
            f"Fetch policy: cap={settings.fetch.max_characters}, "
            f"batch={settings.fetch.batch_size}, "
            f"delay={settings.fetch.batch_delay_ms}ms"
        )
        logger.info(f"Cache TTL: {settings.cache.ttl_minutes} minutes")

    @classmethod
    def validate_config(cls) -> bool:
        """
        Validate current configuration.

        Returns:
            True if the live pipeline can run
        """
        if not cls._settings:
            logger.error("No configuration loaded")
            return False

        if cls._settings.fetch.use_mock_data:
            return True

        required_checks = [
            (cls._settings.warcraftlogs.client_id, "WARCRAFT_LOGS_CLIENT_ID"),
            (cls._settings.warcraftlogs.client_secret, "WARCRAFT_LOGS_CLIENT_SECRET"),
        ]

        valid = True
        for value, name in required_checks:
            if not value:
                logger.error(f"Missing required config: {name}")
                valid = False

        return valid
