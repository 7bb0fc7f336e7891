"""CLI entry point for tagsift.

Invoked by an editor integration, never by hand::

    tagsift TAGFILE LANGUAGE ORDER NCHARS NSKIP NEQUIV SKIP EQUIV < buffer

The buffer (NCHARS bytes) arrives on stdin. For every reported tag, two
lines are written to stdout: the kind character, then the tag name.
"""

import argparse
import codecs
import io
import sys
import tomllib
from pathlib import Path
from typing import BinaryIO, NoReturn, Sequence

from loguru import logger

from .. import __version__
from ..core.config import Config
from ..core.exceptions import (
    EXIT_OK,
    ConfigError,
    InteractiveInputError,
    InvalidIntegerError,
    ResourceError,
    TagsiftError,
    TagSourceError,
    UsageError,
)
from ..core.logging import configure_logging
from ..core.types import TagEntry
from ..services import FilterRequest, filter_tags
from ..sources import read_buffer, read_tag_lines
from ..tags import write_entries
from .context import RunContext, report_error

LIST_DELIMITER = ":"


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(f"Error: Insufficient input parameters ({message}).")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = _ArgumentParser(
        prog="tagsift",
        description="Filter ctags lines down to the tags present in an editor buffer",
    )
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log why each tag line was rejected",
    )
    parser.add_argument("--config", type=Path, help="TOML configuration file")

    parser.add_argument("tagfile", help="Tag file to scan")
    parser.add_argument("language", help="Requested language (may be regex escaped)")
    parser.add_argument("order", help="Accepted kind characters, e.g. 'fcm'")
    parser.add_argument("nchars", help="Number of buffer bytes on stdin")
    parser.add_argument("nskip", help="Number of entries in SKIP")
    parser.add_argument("nequiv", help="Number of entries in EQUIV")
    parser.add_argument("skip", help="Colon-delimited tag names to skip")
    parser.add_argument("equiv", help="Colon-delimited from:to language pairs")
    return parser


def parse_count(value: str, field: str) -> int:
    """Parse a non-negative integer argument.

    Args:
        value: Argument text.
        field: Argument name, used in the error message.

    Returns:
        Parsed integer.

    Raises:
        InvalidIntegerError: If the value is not a non-negative integer.
    """
    # ASCII digits only
    if not (value.isascii() and value.isdigit()):
        raise InvalidIntegerError(value, field)
    return int(value)


def split_colon_list(value: str) -> list[str]:
    """Split a colon-delimited argument, dropping empty segments.

    Example:
        >>> split_colon_list("foo:bar:")
        ['foo', 'bar']
    """
    return [item for item in value.split(LIST_DELIMITER) if item]


def _check_count(field: str, declared: int, items: list[str]) -> None:
    if declared != len(items):
        logger.debug(f"{field} declared {declared} entries, parsed {len(items)}")


def _load_config(args: argparse.Namespace) -> Config:
    try:
        config = Config.from_env_or_file(args.config)
    except OSError as e:
        raise TagSourceError(f"Failed to read config: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid config file: {e}") from e

    try:
        codecs.lookup(config.encoding)
    except LookupError:
        raise ConfigError(f"Unknown encoding '{config.encoding}'") from None

    if args.debug:
        config.logging.debug = True
    return config


def _write_results(entries: list[TagEntry], stdout: BinaryIO, encoding: str) -> int:
    text = io.StringIO(newline="\n")
    written = write_entries(entries, text)
    data = text.getvalue().encode(encoding, errors="surrogateescape")
    try:
        stdout.write(data)
        stdout.flush()
    except OSError as e:
        raise TagSourceError(f"Failed to write results: {e}") from e
    return written


def _run(argv: Sequence[str] | None, stdin: BinaryIO, stdout: BinaryIO) -> int:
    if stdin.isatty():
        raise InteractiveInputError()

    args, extra = create_parser().parse_known_args(argv)
    config = _load_config(args)
    try:
        configure_logging(config.logging)
    except ValueError as e:
        raise ConfigError(f"Invalid log level: {e}") from e
    if extra:
        logger.debug(f"Ignoring extra arguments: {extra}")

    nchars = parse_count(args.nchars, "NCHARS")
    nskip = parse_count(args.nskip, "NSKIP")
    nequiv = parse_count(args.nequiv, "NEQUIV")

    request = FilterRequest(
        language=args.language,
        order=args.order,
        skip=split_colon_list(args.skip),
        equivalences=split_colon_list(args.equiv),
    )
    _check_count("SKIP", nskip, request.skip)
    _check_count("EQUIV", nequiv, request.equivalences)

    lines = read_tag_lines(args.tagfile, config.encoding)
    buffer = read_buffer(stdin, nchars, config.encoding)

    entries = filter_tags(request, lines, buffer)
    written = _write_results(entries, stdout, config.encoding)
    logger.debug(f"Wrote {written} tags")
    return EXIT_OK


def run(
    argv: Sequence[str] | None = None,
    stdin: BinaryIO | None = None,
    stdout: BinaryIO | None = None,
    context: RunContext | None = None,
) -> int:
    """Run one invocation and return its exit status.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:]).
        stdin: Binary stream carrying the buffer (defaults to sys.stdin).
        stdout: Binary stream for results (defaults to sys.stdout).
        context: Invocation context (defaults to one named after argv[0]).

    Returns:
        Process exit status.
    """
    if context is None:
        context = RunContext(program=Path(sys.argv[0]).name or "tagsift")
    if stdin is None:
        stdin = sys.stdin.buffer
    if stdout is None:
        stdout = sys.stdout.buffer

    try:
        return _run(argv, stdin, stdout)
    except TagsiftError as e:
        return report_error(context, e)
    except MemoryError:
        return report_error(context, ResourceError("Memory allocation failed"))


def main() -> NoReturn:
    """Main entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
