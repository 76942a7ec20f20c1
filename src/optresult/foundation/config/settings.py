"""Environment-based configuration using pydantic-settings.

Only the demo runner and logging read these values; the combinators take
no configuration at all.

Example:
    >>> from optresult.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'INFO'

    # Or with environment variables:
    # OPTRESULT_LOG_LEVEL=DEBUG
    # OPTRESULT_LOG_FORMAT=json
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationInfo, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="OPTRESULT_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"
    colors: bool | None = Field(default=None, description="Force ANSI colors (None = auto-detect)")

    @field_validator("level", "format", mode="before")
    @classmethod
    def _normalize_case(cls, v: object, info: ValidationInfo) -> object:
        """Accept debug/Json/... regardless of case."""
        if not isinstance(v, str):
            return v
        return v.upper() if info.field_name == "level" else v.lower()


class OptResultSettings(BaseSettings):
    """Root settings for optresult.

    Loads configuration from environment variables with OPTRESULT_ prefix.
    Supports nested configuration and .env files.

    Example environment variables:
        OPTRESULT_DEBUG=true
        OPTRESULT_LOG_LEVEL=DEBUG
        OPTRESULT_LOG_FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix="OPTRESULT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @computed_field
    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug mode is on, otherwise the configured level."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> OptResultSettings:
    """Get the global settings instance (cached)."""
    return OptResultSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
