"""Per-invocation context for error reporting."""

import sys
from dataclasses import dataclass, field
from typing import TextIO

from loguru import logger

from ..core.exceptions import TagsiftError


@dataclass
class RunContext:
    """Identity and error stream of one CLI invocation.

    Attributes:
        program: Program name used to prefix error messages.
        stderr: Stream that receives error messages.
    """

    program: str = "tagsift"
    stderr: TextIO = field(default_factory=lambda: sys.stderr)


def report_error(context: RunContext, error: TagsiftError) -> int:
    """Print a fatal error and return the exit code for it.

    Args:
        context: Context of the failing invocation.
        error: The fatal error.

    Returns:
        Exit status to terminate the process with.
    """
    logger.debug(f"Fatal {type(error).__name__} (exit {error.exit_code})")
    print(f"{context.program}: {error}", file=context.stderr)
    return error.exit_code
