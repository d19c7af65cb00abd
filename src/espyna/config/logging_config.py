"""Centralized logging configuration for espyna.

Verbosity, level and format are controlled from the environment so the same
build can run quietly in tests and verbosely while debugging providers.
"""

import logging
import logging.config
import os
from enum import Enum
from typing import Any, Dict, Optional


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogVerbosity(str, Enum):
    """Log verbosity modes."""
    QUIET = "QUIET"      # Errors only
    NORMAL = "NORMAL"    # Warnings and above
    VERBOSE = "VERBOSE"  # Info
    DEBUG = "DEBUG"


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}

VERBOSITY_LEVELS = {
    LogVerbosity.QUIET: LogLevel.ERROR,
    LogVerbosity.NORMAL: LogLevel.WARNING,
    LogVerbosity.VERBOSE: LogLevel.INFO,
    LogVerbosity.DEBUG: LogLevel.DEBUG,
}


def get_log_level_from_verbosity(verbosity: str) -> str:
    """Map verbosity mode to log level, WARNING for unknown modes."""
    try:
        return VERBOSITY_LEVELS[LogVerbosity(verbosity.upper())].value
    except ValueError:
        return LogLevel.WARNING.value


def resolve_log_level(level: Optional[str], verbosity: str) -> str:
    """An explicit level wins over the verbosity mode when it names a real level."""
    if level:
        try:
            return LogLevel(level.strip().upper()).value
        except ValueError:
            pass
    return get_log_level_from_verbosity(verbosity)


class LoggingConfig:
    """Builds and applies the dictConfig mapping for the package."""

    # Registries and the mock store log every registration and write
    QUIET_MODULES = (
        "espyna.features.registry",
        "espyna.infrastructure.database.mock",
    )

    ERROR_ONLY_MODULES = (
        "asyncio",
    )

    @staticmethod
    def _module_logger(level: str) -> Dict[str, Any]:
        return {"level": level, "handlers": ["console"], "propagate": False}

    @classmethod
    def build_config(
        cls,
        verbosity: Optional[str] = None,
        log_format: Optional[str] = None,
        level: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Build a dictConfig mapping from arguments, falling back to the environment."""
        verbosity = verbosity or os.getenv("LOG_VERBOSITY", "NORMAL")
        log_format = (log_format or os.getenv("LOG_FORMAT", "simple")).lower()
        effective_level = resolve_log_level(level or os.getenv("LOG_LEVEL"), verbosity)

        try:
            format_string = FORMAT_STRINGS[LogFormat(log_format)]
        except ValueError:
            format_string = FORMAT_STRINGS[LogFormat.SIMPLE]

        quiet_level = LogLevel.DEBUG.value if effective_level == LogLevel.DEBUG.value else LogLevel.WARNING.value
        loggers = {module: cls._module_logger(quiet_level) for module in cls.QUIET_MODULES}
        loggers.update(
            {module: cls._module_logger(LogLevel.ERROR.value) for module in cls.ERROR_ONLY_MODULES}
        )

        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {"format": format_string, "datefmt": "%Y-%m-%d %H:%M:%S"},
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": effective_level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {"level": effective_level, "handlers": ["console"]},
            "loggers": loggers,
        }

    @classmethod
    def configure(
        cls,
        verbosity: Optional[str] = None,
        log_format: Optional[str] = None,
        level: Optional[str] = None,
    ) -> None:
        config = cls.build_config(verbosity, log_format, level)
        logging.config.dictConfig(config)
        logging.getLogger(__name__).debug(f"Logging configured: level={config['root']['level']}")


def setup_logging(
    verbosity: Optional[str] = None,
    log_format: Optional[str] = None,
    level: Optional[str] = None,
) -> None:
    """Configure logging once at startup."""
    LoggingConfig.configure(verbosity, log_format, level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
