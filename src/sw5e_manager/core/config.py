"""Configuration management for the SW5E character manager.

This module provides centralized configuration management using
pydantic-settings, supporting environment variables, .env files, and
runtime configuration overrides.

Example:
    >>> from sw5e_manager.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.casting.reference_class_name
    'Consular'

Environment Variables:
    SW5E_MANAGER_DEBUG: Enable debug mode
    SW5E_MANAGER_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    SW5E_MANAGER_JSON_LOGS: Emit JSON log lines instead of console output
    SW5E_MANAGER_CASTING_REFERENCE_CLASS_NAME: Class used as the power tier reference
    SW5E_MANAGER_CASTING_CASTING_LEVEL_THRESHOLD: Effective level granting casting
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sw5e_manager.core.constants import (
    CASTING_LEVEL_THRESHOLD,
    DEFAULT_REFERENCE_CLASS,
    MAX_CHARACTER_LEVEL,
)
from sw5e_manager.core.exceptions import ConfigurationError


class CastingSettings(BaseSettings):
    """Configuration for the casting calculator.

    Attributes:
        reference_class_name: Class whose level table converts blended
            multiclass levels into a max power level.
        casting_level_threshold: Minimum effective caster level that grants
            a casting type without any known powers.
    """

    model_config = SettingsConfigDict(
        env_prefix="SW5E_MANAGER_CASTING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    reference_class_name: str = Field(
        default=DEFAULT_REFERENCE_CLASS,
        description="Reference class for max power level lookups",
    )
    casting_level_threshold: float = Field(
        default=CASTING_LEVEL_THRESHOLD,
        ge=0,
        le=MAX_CHARACTER_LEVEL,
        description="Effective caster level granting a casting type",
    )

    @field_validator("reference_class_name", mode="after")
    @classmethod
    def validate_reference_class_name(cls, value: str) -> str:
        """Reject blank reference class names.

        Args:
            value: The configured class name.

        Returns:
            The stripped class name.

        Raises:
            ConfigurationError: If the name is empty or whitespace.
        """
        stripped = value.strip()
        if not stripped:
            raise ConfigurationError(
                "reference_class_name must not be blank",
                config_key="reference_class_name",
            )
        return stripped


class Settings(BaseSettings):
    """Main application settings.

    Attributes:
        app_name: Application name.
        debug: Enable debug mode.
        log_level: Application logging level.
        json_logs: Render logs as JSON.
        casting: Casting calculator settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="SW5E_MANAGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="SW5E Character Manager",
        description="Application name",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Render logs as JSON",
    )

    casting: CastingSettings = Field(default_factory=CastingSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "CastingSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
