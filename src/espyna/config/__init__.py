"""Configuration for espyna: settings, logging and shared constants."""

from .settings import EspynaSettings, get_settings, reset_settings
from .logging_config import (
    LoggingConfig,
    LogFormat,
    LogLevel,
    LogVerbosity,
    get_log_level_from_verbosity,
    get_logger,
    resolve_log_level,
    setup_logging,
)
from .constants import BusinessType, ProviderName

__all__ = [
    "EspynaSettings",
    "get_settings",
    "reset_settings",
    "LoggingConfig",
    "LogFormat",
    "LogLevel",
    "LogVerbosity",
    "get_log_level_from_verbosity",
    "get_logger",
    "resolve_log_level",
    "setup_logging",
    "BusinessType",
    "ProviderName",
]
