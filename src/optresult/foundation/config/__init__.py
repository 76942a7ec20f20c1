"""Configuration management using pydantic-settings."""

from .settings import LoggingSettings, OptResultSettings, clear_settings_cache, get_settings

__all__ = [
    "LoggingSettings",
    "OptResultSettings",
    "clear_settings_cache",
    "get_settings",
]
