"""Configuration management for the character-creation engine.

Settings are read with pydantic-settings from environment variables and an
optional ``.env`` file. They only tune fallbacks and diagnostics; the rules
themselves are fixed by the SRD tables.

Example:
    >>> from dnd_chargen.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.engine.default_hit_die
    8

Environment Variables:
    DND_CHARGEN_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    DND_CHARGEN_JSON_LOGS: Emit JSON log lines instead of console output
    DND_CHARGEN_ENGINE_DEFAULT_HIT_DIE: Hit die used for unknown classes
    DND_CHARGEN_ENGINE_DEFAULT_SPEED: Walking speed used without a race
    DND_CHARGEN_ENGINE_STRICT_CONTENT: Reject duplicate content identifiers
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dnd_chargen.core.constants import DEFAULT_HIT_DIE, DEFAULT_SPEED
from dnd_chargen.core.exceptions import ConfigurationError


VALID_HIT_DICE = (6, 8, 10, 12)


class EngineSettings(BaseSettings):
    """Configuration for rule-engine fallbacks.

    Attributes:
        default_hit_die: Hit die size used when a class id does not resolve.
        default_speed: Walking speed used when no race is selected.
        strict_content: Raise on duplicate ids while building catalogs.
    """

    model_config = SettingsConfigDict(
        env_prefix="DND_CHARGEN_ENGINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_hit_die: int = Field(
        default=DEFAULT_HIT_DIE,
        description="Hit die for unresolved classes",
    )
    default_speed: int = Field(
        default=DEFAULT_SPEED,
        ge=0,
        le=120,
        description="Walking speed without a race",
    )
    strict_content: bool = Field(
        default=True,
        description="Reject duplicate content identifiers",
    )

    @field_validator("default_hit_die", mode="after")
    @classmethod
    def validate_hit_die(cls, value: int) -> int:
        """Ensure the fallback hit die is a real class hit die.

        Raises:
            ConfigurationError: If the value is not d6, d8, d10 or d12.
        """
        if value not in VALID_HIT_DICE:
            raise ConfigurationError(
                f"default_hit_die must be one of {VALID_HIT_DICE}, got {value}",
                config_key="default_hit_die",
            )
        return value


class Settings(BaseSettings):
    """Top-level settings for the engine package.

    Attributes:
        app_name: Name reported in log context.
        log_level: Logging level.
        json_logs: Render logs as JSON lines.
        engine: Rule-engine fallbacks.
    """

    model_config = SettingsConfigDict(
        env_prefix="DND_CHARGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="dnd_chargen",
        description="Application name",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Emit JSON log lines",
    )

    engine: EngineSettings = Field(default_factory=EngineSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the settings singleton.

    Returns:
        The cached Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load engine settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "EngineSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
