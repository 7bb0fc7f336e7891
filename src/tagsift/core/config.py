"""Configuration management for tagsift."""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .exceptions import ConfigError

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class LoggingConfig:
    """Diagnostic output configuration."""

    level: str = "WARNING"
    # Log every rejected tag line and a verdict summary
    debug: bool = False

    @property
    def effective_level(self) -> str:
        """Level actually used for the stderr sink."""
        return "DEBUG" if self.debug else self.level.upper()


@dataclass
class Config:
    """Main application configuration."""

    encoding: str = "utf-8"
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        config = cls()
        config._apply_env()
        return config

    @classmethod
    def from_file(cls, path: Path | str) -> "Config":
        """Load configuration from a TOML file, then apply env overrides.

        Args:
            path: Path to the TOML configuration file.

        Returns:
            Populated configuration.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            tomllib.TOMLDecodeError: If the file is not valid TOML.
        """
        with open(path, "rb") as f:
            data = tomllib.load(f)

        config = cls()
        config._apply_mapping(data)
        config._apply_env()
        return config

    @classmethod
    def from_env_or_file(cls, path: Path | str | None = None) -> "Config":
        """Load from an explicit path, else TAGSIFT_CONFIG, else the environment."""
        if path is None:
            path = os.environ.get("TAGSIFT_CONFIG") or None
        if path is not None:
            return cls.from_file(path)
        return cls.from_env()

    def _apply_mapping(self, data: dict[str, Any]) -> None:
        if encoding := data.get("encoding"):
            self.encoding = str(encoding)

        section = data.get("logging", {})
        if not isinstance(section, dict):
            raise ConfigError(
                "Invalid config file: 'logging' must be a table, "
                f"not {type(section).__name__}"
            )
        if level := section.get("level"):
            self.logging.level = str(level)
        if "debug" in section:
            self.logging.debug = bool(section["debug"])

    def _apply_env(self) -> None:
        if debug := os.environ.get("TAGSIFT_DEBUG"):
            self.logging.debug = debug.strip().lower() in _TRUTHY

        if level := os.environ.get("TAGSIFT_LOG_LEVEL"):
            self.logging.level = level

        if encoding := os.environ.get("TAGSIFT_ENCODING"):
            self.encoding = encoding
