"""Tag file and buffer input.

Both inputs are read whole before filtering starts: the tag file because
it is scanned linearly, the buffer because a tag may occur anywhere in it.
"""

from __future__ import annotations

import gzip
import zlib
from pathlib import Path
from typing import BinaryIO

from loguru import logger

from ..core.exceptions import TagSourceError

_GZIP_MAGIC = b"\x1f\x8b"
# Undecodable bytes survive as surrogates so substring tests stay byte exact
_ERRORS = "surrogateescape"


def decode(data: bytes, encoding: str = "utf-8") -> str:
    """Decode raw input without ever failing on invalid byte sequences."""
    return data.decode(encoding, errors=_ERRORS)


def split_lines(text: str) -> list[str]:
    """Split tag file text into lines.

    Carriage returns are dropped wherever they occur and a trailing newline
    does not produce a final empty line.

    Args:
        text: Whole tag file content.

    Returns:
        Lines without line terminators.
    """
    text = text.replace("\r", "")
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def read_tag_lines(path: Path | str, encoding: str = "utf-8") -> list[str]:
    """Read every line of a tag file.

    Gzip-compressed tag files are decompressed transparently.

    Args:
        path: Path to the tag file.
        encoding: Text encoding of the tag file.

    Returns:
        Lines of the tag file, in order.

    Raises:
        TagSourceError: If the path is not a regular file or cannot be read.
    """
    path = Path(path)
    try:
        if not path.is_file():
            if path.exists():
                raise TagSourceError(f"Invalid filetype '{path}'")
            raise TagSourceError(f"Failed to open file '{path}': No such file")

        data = path.read_bytes()
        if data[:2] == _GZIP_MAGIC:
            logger.debug(f"Decompressing gzip tag file {path}")
            data = gzip.decompress(data)
    except PermissionError as e:
        raise TagSourceError(f"Failed to open file '{path}': Permission denied") from e
    except (OSError, EOFError, zlib.error) as e:
        raise TagSourceError(f"Failed to read file '{path}': {e}") from e

    lines = split_lines(decode(data, encoding))
    logger.debug(f"Read {len(lines)} tag lines from {path}")
    return lines


def read_buffer(stream: BinaryIO, nchars: int, encoding: str = "utf-8") -> str:
    """Read the editor buffer from a binary stream.

    Args:
        stream: Binary stream positioned at the start of the buffer.
        nchars: Number of bytes the invoker announced.
        encoding: Text encoding of the buffer.

    Returns:
        Decoded buffer text.

    Raises:
        TagSourceError: If reading the stream fails.
    """
    try:
        data = stream.read(nchars) if nchars > 0 else b""
    except OSError as e:
        raise TagSourceError(f"Failed to read buffer from stdin: {e}") from e

    if len(data) < nchars:
        logger.warning(f"Short buffer read: expected {nchars} bytes, got {len(data)}")
    return decode(data, encoding)
