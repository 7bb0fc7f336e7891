"""Input sources: tag files and the editor buffer."""

from .tagfile import decode, read_buffer, read_tag_lines, split_lines

__all__ = [
    "decode",
    "read_buffer",
    "read_tag_lines",
    "split_lines",
]
