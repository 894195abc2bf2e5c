"""Shared test configuration."""

from __future__ import annotations

import pytest

from hiring_signal.infrastructure.config import get_settings


@pytest.fixture(autouse=True)
def _reset_settings():
    """Environment changes in one test must not leak through the cached settings."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
