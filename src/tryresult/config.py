"""Environment-based configuration using pydantic-settings.

Settings come from TRYRESULT_* environment variables only; no .env file is
read. They are validated once, when tryresult is imported, and again only on
an explicit clear_settings_cache(). Capture and mapping code read the last
validated snapshot, so a bad value never surfaces from inside a capture.

Example:
    >>> from tryresult.config import get_settings
    >>> get_settings().logging.captures
    False

    # Or with environment variables:
    # TRYRESULT_LOG_CAPTURES=true
    # TRYRESULT_LOG_LEVEL=WARNING
    # TRYRESULT_SERIALIZE_SORT_KEYS=true
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging of captured failures."""

    model_config = SettingsConfigDict(
        env_prefix="TRYRESULT_LOG_",
        extra="ignore",
    )

    captures: bool = Field(default=False, description="Log every failure turned into Err")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "DEBUG"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class SerializeSettings(BaseSettings):
    """Rendering of structured failure payloads into diagnostic strings."""

    model_config = SettingsConfigDict(
        env_prefix="TRYRESULT_SERIALIZE_",
        extra="ignore",
    )

    sort_keys: bool = Field(default=False, description="Sort mapping keys in structured diagnostics")


class TryResultSettings(BaseSettings):
    """Root settings, loaded from TRYRESULT_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TRYRESULT_",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    serialize: SerializeSettings = Field(default_factory=SerializeSettings)


def _load() -> TryResultSettings:
    global _active
    _active = TryResultSettings()
    return _active


def get_settings() -> TryResultSettings:
    """Get the active settings snapshot. Never re-validates."""
    return _active


def clear_settings_cache() -> TryResultSettings:
    """Re-read and validate the environment, then install the new settings.

    Raises:
        ValidationError: an environment value is invalid; the previous
            settings stay active
    """
    return _load()


# Validated at import so configuration errors surface at startup
_active: TryResultSettings
_load()
