"""Foundation - building blocks for optresult.

Contains: the Result type with its early-return helpers, and config.
"""

from __future__ import annotations

__all__ = [
    # Errors
    "Result", "Ok", "Err", "returns_result", "Propagation", "UnwrapError",
    # Config
    "OptResultSettings", "LoggingSettings", "get_settings", "clear_settings_cache",
]


def __getattr__(name: str):
    """Lazy imports so the Result type never pulls in pydantic-settings."""
    if name in ("Result", "Ok", "Err", "returns_result", "Propagation", "UnwrapError"):
        from . import errors
        return getattr(errors, name)

    if name in ("OptResultSettings", "LoggingSettings", "get_settings", "clear_settings_cache"):
        from . import config
        return getattr(config, name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
