"""Command-line interface for tagsift."""

from .context import RunContext, report_error
from .main import create_parser, main, run

__all__ = [
    "RunContext",
    "report_error",
    "create_parser",
    "main",
    "run",
]
