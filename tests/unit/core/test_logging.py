"""Tests for logging setup."""

import io

from loguru import logger

from tagsift.core.config import LoggingConfig
from tagsift.core.logging import configure_logging


def test_default_level_hides_debug():
    """Only warnings and above are written by default."""
    sink = io.StringIO()
    configure_logging(LoggingConfig(), sink=sink)

    logger.debug("quiet")
    logger.warning("loud")

    output = sink.getvalue()
    assert "quiet" not in output
    assert "loud" in output


def test_debug_mode_shows_debug():
    """Diagnostic mode writes debug messages."""
    sink = io.StringIO()
    configure_logging(LoggingConfig(debug=True), sink=sink)

    logger.debug("Tag 'x' is a duplicate.")

    assert "Tag 'x' is a duplicate." in sink.getvalue()


def test_replaces_previous_sinks():
    """Reconfiguring leaves a single sink."""
    first = io.StringIO()
    second = io.StringIO()
    configure_logging(LoggingConfig(), sink=first)
    configure_logging(LoggingConfig(), sink=second)

    logger.error("once")

    assert first.getvalue() == ""
    assert "once" in second.getvalue()
