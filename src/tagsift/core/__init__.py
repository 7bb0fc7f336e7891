"""Core types, configuration and errors for tagsift."""

from .config import Config, LoggingConfig
from .exceptions import (
    EXIT_INTERACTIVE,
    EXIT_INVALID_INTEGER,
    EXIT_IO,
    EXIT_OK,
    EXIT_PATTERN,
    EXIT_RESOURCE,
    EXIT_USAGE,
    ConfigError,
    InteractiveInputError,
    InvalidIntegerError,
    PatternCompileError,
    ResourceError,
    TagsiftError,
    TagSourceError,
    UsageError,
)
from .types import TagCandidate, TagEntry, Verdict

__all__ = [
    "Config",
    "LoggingConfig",
    "EXIT_OK",
    "EXIT_INTERACTIVE",
    "EXIT_USAGE",
    "EXIT_PATTERN",
    "EXIT_IO",
    "EXIT_INVALID_INTEGER",
    "EXIT_RESOURCE",
    "TagsiftError",
    "ConfigError",
    "InteractiveInputError",
    "UsageError",
    "InvalidIntegerError",
    "PatternCompileError",
    "TagSourceError",
    "ResourceError",
    "TagCandidate",
    "TagEntry",
    "Verdict",
]
