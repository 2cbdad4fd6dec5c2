"""
Configuration module for the sun calendar.

Loads configuration from an optional JSON file and environment variables.
"""

import copy
import json
import os
from typing import Dict, Any, Optional
from pathlib import Path

from . import constants


DEFAULT_CONFIG: Dict[str, Any] = {
    "api": {
        "geocoding_url": constants.DEFAULT_GEOCODING_URL,
        "forecast_url": constants.DEFAULT_FORECAST_URL,
        "timeout": None,
        "max_retries": 0,
    },
    "display": {
        "language": constants.DEFAULT_LANGUAGE,
    },
    "calendar": {
        "past_days": constants.DEFAULT_PAST_DAYS,
        "future_days": constants.DEFAULT_FUTURE_DAYS,
        "default_city": constants.DEFAULT_CITY,
    },
    "logging": {
        "level": "INFO",
        "console_level": "WARNING",
        "file": None,
    },
}


class Config:
    """Configuration manager for the application."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses CONFIG_FILE env var
                        or defaults to 'config.json'. A missing default file is not an error.
        """
        explicit = config_file or os.getenv("CONFIG_FILE")
        self.config_file = explicit or "config.json"
        self._explicit = explicit is not None
        self.config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)
        self._load_config()
        self._override_from_env()
        self._validate_config()

    def _load_config(self) -> None:
        """Load configuration from JSON file and merge it over the defaults."""
        config_path = Path(self.config_file)
        if not config_path.exists():
            if self._explicit:
                raise FileNotFoundError(f"Configuration file not found: {self.config_file}")
            return

        with open(config_path, "r", encoding="utf-8") as f:
            loaded = json.load(f)

        for section, values in loaded.items():
            if isinstance(values, dict) and isinstance(self.config.get(section), dict):
                self.config[section].update(values)
            else:
                self.config[section] = values

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        if os.getenv("GEOCODING_URL"):
            self.config["api"]["geocoding_url"] = os.getenv("GEOCODING_URL")

        if os.getenv("FORECAST_URL"):
            self.config["api"]["forecast_url"] = os.getenv("FORECAST_URL")

        if os.getenv("SUN_CALENDAR_LANGUAGE"):
            self.config["display"]["language"] = os.getenv("SUN_CALENDAR_LANGUAGE")

        if os.getenv("LOG_LEVEL"):
            self.config["logging"]["level"] = os.getenv("LOG_LEVEL")

        if os.getenv("LOG_CONSOLE_LEVEL"):
            self.config["logging"]["console_level"] = os.getenv("LOG_CONSOLE_LEVEL")

        if os.getenv("LOG_FILE"):
            self.config["logging"]["file"] = os.getenv("LOG_FILE")

    def _validate_config(self) -> None:
        """Validate that required configuration keys are present and sane."""
        required_config = {
            "api": ["geocoding_url", "forecast_url"],
            "display": ["language"],
            "calendar": ["past_days", "future_days"],
        }

        missing_keys = []
        for section, keys in required_config.items():
            section_values = self.config.get(section)
            if not isinstance(section_values, dict):
                missing_keys.append(section)
                continue
            for key in keys:
                if section_values.get(key) is None:
                    missing_keys.append(f"{section}.{key}")

        if missing_keys:
            raise ValueError(
                f"Missing required configuration keys: {', '.join(missing_keys)}"
            )

        if self.language not in constants.SUPPORTED_LANGUAGES:
            raise ValueError(
                f"Unsupported display language '{self.language}'. "
                f"Supported: {', '.join(constants.SUPPORTED_LANGUAGES)}"
            )

        if self.past_days < 0 or self.future_days < 0:
            raise ValueError("calendar.past_days and calendar.future_days must not be negative")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'api.forecast_url')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def geocoding_url(self) -> str:
        """Get geocoding API base URL."""
        return self.get("api.geocoding_url", constants.DEFAULT_GEOCODING_URL)

    @property
    def forecast_url(self) -> str:
        """Get forecast API base URL."""
        return self.get("api.forecast_url", constants.DEFAULT_FORECAST_URL)

    @property
    def api_timeout(self) -> Optional[float]:
        """Get API timeout in seconds (None waits indefinitely)."""
        return self.get("api.timeout")

    @property
    def api_max_retries(self) -> int:
        """Get maximum API retry attempts."""
        return self.get("api.max_retries", 0)

    @property
    def language(self) -> str:
        """Get display language."""
        return self.get("display.language", constants.DEFAULT_LANGUAGE)

    @property
    def past_days(self) -> int:
        return int(self.get("calendar.past_days", constants.DEFAULT_PAST_DAYS))

    @property
    def future_days(self) -> int:
        return int(self.get("calendar.future_days", constants.DEFAULT_FUTURE_DAYS))

    @property
    def default_city(self) -> str:
        return self.get("calendar.default_city", constants.DEFAULT_CITY)

    @property
    def log_level(self) -> str:
        return self.get("logging.level", "INFO")

    @property
    def log_console_level(self) -> str:
        return self.get("logging.console_level", "WARNING")

    @property
    def log_file(self) -> Optional[str]:
        return self.get("logging.file")

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(file={self.config_file}, language={self.language})"
