"""Logging setup for the tagsift CLI.

Standard output carries the result stream, so all diagnostics go to a
single stderr sink.
"""

import sys
from typing import TextIO

from loguru import logger

from .config import LoggingConfig

_FORMAT = "<level>{level: <8}</level> | {name}:{function} - {message}"


def configure_logging(config: LoggingConfig, sink: TextIO | None = None) -> int:
    """Replace loguru's default handler with one stderr sink.

    Args:
        config: Logging configuration to apply.
        sink: Stream to log to (defaults to sys.stderr).

    Returns:
        Handler id of the added sink.
    """
    logger.remove()
    return logger.add(
        sink if sink is not None else sys.stderr,
        level=config.effective_level,
        format=_FORMAT,
        colorize=False,
    )
