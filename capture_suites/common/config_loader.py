"""
================================================================================
Configuration Loader
================================================================================

Authoring settings from config/config.yaml with environment variable
overrides.

Only the keys listed in ``DEFAULTS`` exist. Each one can be overridden by an
environment variable named after it (``authoring.warn_duplicate_names`` ->
``AUTHORING_WARN_DUPLICATE_NAMES``); the value is converted to the type of
the key's default.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


# Default configuration file path
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "config.yaml"

# Known keys and their defaults; None means "unset"
DEFAULTS: Dict[str, Any] = {
    "logging.level": "INFO",
    "logging.format": None,
    "logging.file": None,
    "logging.rotation": "10 MB",
    "logging.retention": "7 days",
    "authoring.warn_duplicate_names": True,
}

TRUE_VALUES = ("true", "1", "yes", "on")
FALSE_VALUES = ("false", "0", "no", "off")


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


def env_name(key: str) -> str:
    """Environment variable overriding ``key``."""
    return key.upper().replace(".", "_")


class ConfigLoader:
    """
    Singleton access to the authoring settings.

    Configuration hierarchy (highest to lowest priority):
        1. Environment variables (LOGGING_LEVEL, AUTHORING_WARN_DUPLICATE_NAMES)
        2. YAML configuration file
        3. DEFAULTS

    Usage:
        >>> config = ConfigLoader()
        >>> config.get("authoring.warn_duplicate_names")
        True
    """

    _instance: Optional["ConfigLoader"] = None

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Args:
            config_path: YAML file to read. Uses DEFAULT_CONFIG_PATH if not specified.
        """
        if getattr(self, "_initialized", False):
            return

        self._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._values: Dict[str, Any] = self._load_file()
        self._initialized = True

    def _load_file(self) -> Dict[str, Any]:
        """Read the YAML file into a flat ``{dotted.key: value}`` dict."""
        if not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )
            return {}

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                content = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}"
            ) from e

        if not isinstance(content, dict):
            raise ConfigurationError(
                f"Configuration file must contain a mapping: {self._config_path}"
            )

        values = {}
        for section, entries in content.items():
            if not isinstance(entries, dict):
                raise ConfigurationError(f"Section '{section}' must be a mapping")
            for name, value in entries.items():
                key = f"{section}.{name}"
                if key not in DEFAULTS:
                    logger.warning(f"Ignoring unknown configuration key: {key}")
                    continue
                values[key] = value

        logger.debug(f"Loaded configuration from: {self._config_path}")
        return values

    def get(self, key: str) -> Any:
        """
        Get a setting by dot-notation key.

        Raises:
            ConfigurationError: key is unknown, or its environment override
                                cannot be converted
        """
        if key not in DEFAULTS:
            raise ConfigurationError(f"Unknown configuration key: {key}")

        env_value = os.environ.get(env_name(key))
        if env_value is not None:
            return self._convert(key, env_value)

        value = self._values.get(key)
        return DEFAULTS[key] if value is None else value

    def _convert(self, key: str, value: str) -> Any:
        """Convert an environment string to the type of the key's default."""
        if isinstance(DEFAULTS[key], bool):
            lowered = value.strip().lower()
            if lowered in TRUE_VALUES:
                return True
            if lowered in FALSE_VALUES:
                return False
            raise ConfigurationError(
                f"{env_name(key)} must be one of {TRUE_VALUES + FALSE_VALUES}, got {value!r}"
            )
        return value

    @classmethod
    def reset(cls) -> None:
        """Drop the singleton so the next access reloads configuration."""
        cls._instance = None


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "DEFAULTS",
    "DEFAULT_CONFIG_PATH",
    "env_name",
]
