"""Configuration management using pydantic-settings.

Provides environment-based configuration with type safety and validation.
"""

from .settings import (
    FuncprogSettings,
    LoggingSettings,
    StreamSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "FuncprogSettings",
    "LoggingSettings",
    "StreamSettings",
    "clear_settings_cache",
    "get_settings",
]
