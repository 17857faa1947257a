"""Pytest configuration shared by the unit suites."""

from __future__ import annotations

from typing import Generator

import pytest

from text_commonizer.cleansing import get_cleansing_registry
from text_commonizer.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """Drop cached settings around every test so monkeypatched env vars apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def cleansing_registry():
    """Registry pointed back at the bundled profiles after the test."""
    registry = get_cleansing_registry()
    yield registry
    registry.set_config_path(None)
    get_settings.cache_clear()
    registry.reload_profiles()
