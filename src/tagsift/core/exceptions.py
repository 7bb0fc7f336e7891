"""Custom exceptions for tagsift.

Every fatal condition maps to a fixed process exit code so the invoking
editor integration can tell failure classes apart.
"""

EXIT_OK = 0
EXIT_INTERACTIVE = 1
EXIT_USAGE = 2
EXIT_PATTERN = 3
EXIT_IO = 4
EXIT_INVALID_INTEGER = 30
EXIT_RESOURCE = 100


class TagsiftError(Exception):
    """Base exception for all tagsift errors."""

    exit_code: int = 1


class InteractiveInputError(TagsiftError):
    """Standard input is a terminal instead of a pipe."""

    exit_code = EXIT_INTERACTIVE

    def __init__(self) -> None:
        super().__init__("This program can't be run manually.")


class UsageError(TagsiftError):
    """Too few command-line arguments."""

    exit_code = EXIT_USAGE


class ConfigError(UsageError):
    """A configuration file or variable holds an unusable value."""


class InvalidIntegerError(UsageError):
    """A numeric argument could not be parsed."""

    exit_code = EXIT_INVALID_INTEGER

    def __init__(self, value: str, field: str | None = None):
        """Initialize exception with the rejected value.

        Args:
            value: The argument text that failed to parse.
            field: Name of the argument, if known.
        """
        self.value = value
        self.field = field
        where = f" for {field}" if field else ""
        super().__init__(f"Invalid integer '{value}'{where}.")


class PatternCompileError(TagsiftError):
    """The tag pattern built from the requested language is not a valid regex."""

    exit_code = EXIT_PATTERN

    def __init__(self, message: str, offset: int | None, pattern: str):
        """Initialize exception with regex engine diagnostics.

        Args:
            message: Error message reported by the regex engine.
            offset: Offset into the pattern where compilation failed.
            pattern: The full pattern text that failed to compile.
        """
        self.message = message
        self.offset = offset
        self.pattern = pattern
        super().__init__(
            f"Pattern compilation failed at offset {offset}: {message}"
        )


class TagSourceError(TagsiftError):
    """Tag file or buffer could not be read."""

    exit_code = EXIT_IO


class ResourceError(TagsiftError):
    """Memory could not be allocated."""

    exit_code = EXIT_RESOURCE
