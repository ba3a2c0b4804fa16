"""
Configuration management utilities.

Settings for a run come from three layers: built-in defaults, an optional
TOML file, and command-line flags. This module owns the file layer.

Example configuration::

    [downloader]
    destination = "~/visuals"
    certified_only = true
    retry_count = 5
    retry_delay = 2.5
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import CONFIG_SECTION, DEFAULT_CONFIG_PATH


class ConfigManager:
    """
    Manages configuration loading and access.

    The file is read lazily on first access and cached afterwards.
    """

    def __init__(self, config_path: Optional[str] = None) -> None:
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to configuration file. If None, uses default path.
        """
        self.config_path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()
        self._config: Optional[Dict[str, Any]] = None

    def exists(self) -> bool:
        """Check whether the configuration file is present."""
        return self.config_path.is_file()

    def load(self) -> Dict[str, Any]:
        """
        Load configuration from file.

        Returns:
            Dictionary containing configuration data

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config file is invalid
        """
        if self._config is not None:
            return self._config

        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        try:
            with open(self.config_path, "rb") as f:
                self._config = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in configuration file {self.config_path}: {e}") from e
        except OSError as e:
            raise ValueError(f"Failed to load configuration from {self.config_path}: {e}") from e

        logging.debug("Loaded configuration from %s", self.config_path)
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key.

        Supports nested keys using dot notation (e.g., "downloader.retry_count").

        Args:
            key: Configuration key (supports dot notation for nested keys)
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value: Any = self.load()
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return default if value is None else value

    def get_section(self, section: str = CONFIG_SECTION) -> Dict[str, Any]:
        """
        Get an entire configuration section.

        Args:
            section: Section name (default: "downloader")

        Returns:
            Dictionary containing section data, or empty dict if section not found
        """
        section_data = self.get(section, {})
        if not isinstance(section_data, dict):
            raise ValueError(f"Section [{section}] in {self.config_path} must be a table")
        return section_data


__all__ = ["ConfigManager"]
