"""Shared fixtures for funcprog tests."""

from __future__ import annotations

import pytest

from funcprog.foundation.config import clear_settings_cache


@pytest.fixture(autouse=True)
def fresh_settings():
    """Each test reads settings from its own environment."""
    clear_settings_cache()
    yield
    clear_settings_cache()
