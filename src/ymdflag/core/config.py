#!/usr/bin/env python3
"""
Configuration Management for ymdflag

Handles environment-based configuration for the ymdflag command line tools.
The core YMDFlag type never reads this module; the CLI passes the configured
timezone into the option types it builds.
"""

import logging
import os
from dataclasses import dataclass
from datetime import tzinfo
from enum import Enum
from typing import Any

from dotenv import load_dotenv

from .errors import YMDTimezoneError
from .timezones import load_location

# Load environment variables from .env file
load_dotenv()

LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class Config:
    """
    Main configuration class for ymdflag.

    Loads configuration from environment variables with local-time defaults.
    """

    environment: Environment

    # Date settings
    timezone_name: str = ""
    path_separator: str = os.sep

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("YMDFLAG_ENV", "development"))

        return cls(
            environment=env,
            timezone_name=os.getenv("YMDFLAG_TIMEZONE", ""),
            path_separator=os.getenv("YMDFLAG_PATH_SEPARATOR", os.sep),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    @property
    def location(self) -> tzinfo | None:
        """
        Default location for date options.

        Raises:
            YMDTimezoneError: If timezone_name is not a known zone
        """
        return load_location(self.timezone_name)

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        try:
            load_location(self.timezone_name)
        except YMDTimezoneError as e:
            errors.append(f"YMDFLAG_TIMEZONE is invalid: {e}")

        if len(self.path_separator) != 1:
            errors.append(f"YMDFLAG_PATH_SEPARATOR must be one character: {self.path_separator!r}")

        if self.log_level not in LOG_LEVELS:
            errors.append(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)
        if self.debug:
            level = logging.DEBUG

        # Configure format based on environment
        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        result: dict[str, Any] = {}
        for field_name, field_value in self.__dict__.items():
            if isinstance(field_value, Enum):
                result[field_name] = field_value.value
            else:
                result[field_name] = field_value
        return result


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        # Validate configuration
        errors = _config.validate()
        if errors:
            _config = None
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        # Setup logging
        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()

