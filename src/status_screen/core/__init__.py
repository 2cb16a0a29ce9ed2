"""Core module providing configuration, logging, constants and exceptions.

Exports:
    Exceptions:
        StatusScreenError: Base exception for all application errors.
        ConfigurationError: Configuration-related errors.
        ValidationError: Malformed character records.
        EngineError: Stat engine contract violations.
        StaleResultError: Snapshot capture from an outdated result.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from status_screen.core.exceptions import (
    ConfigurationError,
    EngineError,
    StaleResultError,
    StatusScreenError,
    ValidationError,
)
from status_screen.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)
from status_screen.core.config import (
    BondSettings,
    BondSyncRule,
    FeatureSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)


__all__ = [
    # Exceptions
    "StatusScreenError",
    "ConfigurationError",
    "ValidationError",
    "EngineError",
    "StaleResultError",
    # Configuration
    "Settings",
    "BondSettings",
    "BondSyncRule",
    "FeatureSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
