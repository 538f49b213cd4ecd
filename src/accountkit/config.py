"""Configuration management for accountkit."""

import os
from dataclasses import dataclass

from accountkit.domain.errors import ConfigurationError

LOG_FORMATS = ("standard", "json")


@dataclass
class AppConfig:
    """Runtime configuration for the CLI."""

    log_level: str = "WARNING"
    log_format: str = "standard"

    def __post_init__(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"Unknown log format '{self.log_format}' (expected one of: {', '.join(LOG_FORMATS)})"
            )

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create config from environment variables."""
        return cls(
            log_level=os.getenv("ACCOUNTKIT_LOG_LEVEL", "WARNING"),
            log_format=os.getenv("ACCOUNTKIT_LOG_FORMAT", "standard").lower(),
        )
