"""Environment-based configuration using pydantic-settings.

Provides type-safe, validated configuration from environment variables
with sensible defaults. Supports .env files.

Example:
    >>> from funcprog.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.stream.materialize_limit
    1000000
    >>> settings.logging.level
    'WARNING'

    # Or with environment variables:
    # FUNCPROG_STREAM_MATERIALIZE_LIMIT=5000
    # FUNCPROG_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, PositiveInt, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FUNCPROG_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["json", "text"] = "text"
    include_timestamps: bool = True

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class StreamSettings(BaseSettings):
    """Lazy stream configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FUNCPROG_STREAM_",
        extra="ignore",
    )

    materialize_limit: PositiveInt = Field(
        default=1_000_000,
        description="Max elements Stream.to_list() forces before faulting (guards infinite streams)",
    )


class FuncprogSettings(BaseSettings):
    """Root settings for funcprog.

    Loads configuration from environment variables with FUNCPROG_ prefix.

    Example environment variables:
        FUNCPROG_DEBUG=true
        FUNCPROG_LOG_LEVEL=DEBUG
        FUNCPROG_LOG_FORMAT=json
        FUNCPROG_STREAM_MATERIALIZE_LIMIT=10000
    """

    model_config = SettingsConfigDict(
        env_prefix="FUNCPROG_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    # Nested settings (loaded with FUNCPROG_LOG_, FUNCPROG_STREAM_)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    stream: StreamSettings = Field(default_factory=StreamSettings)

    @computed_field
    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug mode is on, else the configured level."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> FuncprogSettings:
    """Get the global settings instance (cached).

    Example:
        >>> get_settings().debug
        False
    """
    return FuncprogSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
