"""Shared fixtures."""

import pytest

from social_manager.utils.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so env/YAML changes in one test don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
