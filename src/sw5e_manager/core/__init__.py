"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        Sw5eManagerError: Base exception for all application errors.
        ConfigurationError: Configuration-related errors.
        ReferenceDataError: Corrupt static rule data.
        RuleTableError: Missing rows or columns in level tables.

    Configuration:
        Settings: Main application settings class.
        CastingSettings: Casting calculator settings.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
"""

from __future__ import annotations

from sw5e_manager.core.config import (
    CastingSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from sw5e_manager.core.exceptions import (
    ConfigurationError,
    ReferenceDataError,
    RuleTableError,
    Sw5eManagerError,
)
from sw5e_manager.core.logging import (
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
    "Sw5eManagerError",
    "ConfigurationError",
    "ReferenceDataError",
    "RuleTableError",
    # Configuration
    "Settings",
    "CastingSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
]
