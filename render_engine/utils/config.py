"""
Configuration utility for the render engine.
"""

import copy
import json
import logging
import os
from typing import Any, Dict, Optional

from ..core.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "viewport": {
        "width": 800,
        "height": 600
    },
    "html": {
        # "html.parser" keeps the markup as written, "html5lib" repairs it
        "tree_builder": "html.parser"
    },
    "canvas": {
        "background": "#ffffff"
    },
    "logging": {
        "console_level": "INFO",
        "file_level": "DEBUG",
        "file": None
    }
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    """Recursively merge ``override`` into ``base`` in place."""
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value


class Config:
    """Configuration manager for the render engine."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to a JSON config file. Without one, only the
                built-in defaults are used.
        """
        self.config_path = config_path
        self.config: Dict[str, Any] = {}

        self.load()

        logger.debug(f"Configuration initialized (config_path: {config_path})")

    def load(self) -> None:
        """
        Load configuration from file on top of the defaults.

        Raises:
            ConfigError: If the file exists but is not a JSON object
        """
        self._set_defaults()

        if not self.config_path:
            return

        if not os.path.exists(self.config_path):
            logger.debug(f"Configuration file not found at {self.config_path}, using defaults")
            return

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigError(f"Cannot read configuration {self.config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration {self.config_path} must contain a JSON object")

        _merge(self.config, data)
        logger.debug(f"Configuration loaded from {self.config_path}")

    def save(self, config_path: Optional[str] = None) -> None:
        """
        Save configuration to file.

        Args:
            config_path: Destination, defaults to the path the config was loaded from

        Raises:
            ConfigError: If there is no destination or it cannot be written
        """
        path = config_path or self.config_path
        if not path:
            raise ConfigError("No configuration path to save to")

        try:
            config_dir = os.path.dirname(path)
            if config_dir:
                os.makedirs(config_dir, exist_ok=True)

            with open(path, 'w', encoding='utf-8') as f:
                json.dump(self.config, f, indent=4)
        except OSError as e:
            raise ConfigError(f"Cannot write configuration {path}: {e}") from e

        logger.debug(f"Configuration saved to {path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key (can be nested using dots, e.g. 'viewport.width')
            default: Default value if key doesn't exist

        Returns:
            Any: Configuration value or default
        """
        parts = key.split('.')
        config = self.config

        for part in parts[:-1]:
            if part not in config or not isinstance(config[part], dict):
                return default
            config = config[part]

        return config.get(parts[-1], default)

    def get_int(self, key: str) -> int:
        """
        Get a configuration value that must be a non-negative integer.

        Raises:
            ConfigError: If the value is missing or not a non-negative integer
        """
        value = self.get(key)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigError(f"Configuration value {key} must be a non-negative integer, got {value!r}")
        return value

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            key: Configuration key (can be nested using dots, e.g. 'viewport.width')
            value: Configuration value
        """
        parts = key.split('.')
        config = self.config

        for part in parts[:-1]:
            if not isinstance(config.get(part), dict):
                config[part] = {}
            config = config[part]

        config[parts[-1]] = value

    def remove(self, key: str) -> bool:
        """
        Remove a configuration value.

        Args:
            key: Configuration key

        Returns:
            bool: True if key was removed
        """
        parts = key.split('.')
        config = self.config

        for part in parts[:-1]:
            if part not in config or not isinstance(config[part], dict):
                return False
            config = config[part]

        if parts[-1] in config:
            del config[parts[-1]]
            return True
        return False

    def _set_defaults(self) -> None:
        """Set default configuration values."""
        self.config = copy.deepcopy(DEFAULT_CONFIG)
        logger.debug("Default configuration set")
