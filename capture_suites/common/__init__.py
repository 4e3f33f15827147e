"""
================================================================================
Capture Suites Common Utilities
================================================================================

Shared configuration access and logging setup.

Exports:
    - ConfigLoader: YAML + environment configuration (see config_loader)
    - get_config: Convenience function to get configuration values
    - warn_duplicate_names: Whether reused suite/state names are logged
    - init_logger: Function to initialize loguru logger with standard settings

Usage:
    from capture_suites.common import get_config, init_logger

    init_logger()
    level = get_config("logging.level")

================================================================================
"""

import os
import sys
from typing import Any

from loguru import logger

from .config_loader import ConfigLoader, ConfigurationError


DEFAULT_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


# ============================================================
# Configuration Access
# ============================================================

def get_config(key: str) -> Any:
    """
    Convenience function to get a configuration value.

    Args:
        key: Configuration key using dot notation, one of config_loader.DEFAULTS

    Example:
        level = get_config("logging.level")
    """
    return ConfigLoader().get(key)


def warn_duplicate_names() -> bool:
    """Whether a reused sibling suite or state name is logged as a warning."""
    return bool(get_config("authoring.warn_duplicate_names"))


# ============================================================
# Logging Setup
# ============================================================

_logger_initialized = False


def init_logger(
    level: str = None,
    format_string: str = None,
    log_file: str = None
) -> None:
    """
    Initializes the loguru logger with standard settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        format_string: Log format string. Uses default if not provided.
        log_file: Optional file path to write logs to.

    Example:
        init_logger()  # Use defaults
        init_logger(level="DEBUG", log_file="logs/authoring.log")
    """
    global _logger_initialized

    if _logger_initialized:
        return

    logger.remove()

    level = (level or get_config("logging.level")).upper()
    format_string = format_string or get_config("logging.format") or DEFAULT_LOG_FORMAT

    logger.add(
        sys.stderr,
        format=format_string,
        level=level,
        colorize=True,
    )

    log_file = log_file or get_config("logging.file")
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        logger.add(
            log_file,
            format=format_string,
            level=level,
            rotation=get_config("logging.rotation"),
            retention=get_config("logging.retention"),
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {level}")


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "DEFAULT_LOG_FORMAT",
    "get_config",
    "init_logger",
    "warn_duplicate_names",
]
