"""Configuration loader for the square root averaging tool."""

import logging
import os
from numbers import Real
from typing import Any, Dict, List, Optional

import yaml

from .models import InputValue


logger = logging.getLogger(__name__)

DEFAULT_VALUES: List[InputValue] = [1.0, None, 2.5, 4.0, -3.0, None, 3.5]

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ConfigError(Exception):
    """Raised when configuration is invalid or cannot be loaded."""

    pass


class Config:
    """Application configuration manager."""

    SEARCH_PATHS = [
        "sqrt-average.yaml",
        "sqrt-average.yml",
        "~/.config/sqrt-average/config.yaml",
        "/etc/sqrt-average/config.yaml",
    ]

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_path: Path to config file. If None, searches default locations
                and falls back to built-in defaults when none exists.
        """
        self.config_path = config_path or self._find_config_file()
        self._data: Dict[str, Any] = {}
        if self.config_path is not None:
            self.load()
        else:
            logger.info("No config file found, using defaults")

    def _find_config_file(self) -> Optional[str]:
        """
        Find the configuration file in default locations.

        Returns:
            Path to config file, or None if there is none
        """
        for path in self.SEARCH_PATHS:
            path = os.path.expanduser(path)
            if os.path.isfile(path):
                logger.info(f"Found config file at: {path}")
                return path

        return None

    def load(self) -> None:
        """
        Load configuration from file.

        Raises:
            ConfigError: If config file cannot be loaded or is invalid
        """
        logger.info(f"Loading configuration from: {self.config_path}")
        try:
            with open(self.config_path, "r") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise ConfigError(f"Config file not found: {self.config_path}")
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file: {e}")
        except OSError as e:
            raise ConfigError(f"Failed to read config file {self.config_path}: {e}")

        self._data = data if data is not None else {}
        self._validate()

    def _section(self, name: str) -> Dict[str, Any]:
        """Return a top-level section, treating a missing or null one as empty."""
        section = self._data.get(name)
        return section if section is not None else {}

    def _validate(self) -> None:
        """
        Validate the configuration data.

        Raises:
            ConfigError: If configuration is invalid
        """
        if not isinstance(self._data, dict):
            raise ConfigError("Config file must contain a mapping at the top level")

        for name in ("logging", "input"):
            if not isinstance(self._section(name), dict):
                raise ConfigError(f"'{name}' section must be a mapping")

        values = self._section("input").get("values")
        if values is None:
            return

        if not isinstance(values, list):
            raise ConfigError(f"'input.values' must be a list, got {type(values).__name__}")

        for index, value in enumerate(values):
            if value is None:
                continue
            # bool is a Real subclass but not a measurement
            if isinstance(value, bool) or not isinstance(value, Real):
                raise ConfigError(
                    f"'input.values[{index}]' must be a number or null, got {value!r}"
                )
            try:
                float(value)
            except OverflowError:
                raise ConfigError(f"'input.values[{index}]' is out of floating point range")

    def get_logging_config(self) -> Dict[str, Any]:
        """
        Get logging configuration, filled in with defaults.

        Returns:
            Dictionary with logging settings
        """
        logging_config = {"level": "INFO", "format": DEFAULT_LOG_FORMAT}
        logging_config.update(self._section("logging"))
        return logging_config

    def get_values(self) -> List[InputValue]:
        """
        Get the input values to average.

        Returns:
            List of floats, with None for missing values
        """
        values = self._section("input").get("values")
        if values is None:
            return list(DEFAULT_VALUES)
        return [None if value is None else float(value) for value in values]
