"""Shared fixtures."""

import pytest

from guild_leaderboard.core.config import Settings

from tests.helpers import make_settings


@pytest.fixture
def settings() -> Settings:
    return make_settings()
