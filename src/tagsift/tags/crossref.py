"""Cross-reference accepted tags against the editor buffer."""

from typing import Iterable, Iterator, TextIO

from ..core.types import TagEntry


def cross_reference(entries: Iterable[TagEntry], buffer: str) -> Iterator[TagEntry]:
    """Yield entries whose name occurs anywhere in the buffer.

    Containment is a plain substring test: "cat" is found in "category".

    Args:
        entries: Accepted entries, usually a ResultSet.
        buffer: Full text of the source buffer.

    Yields:
        Entries present in the buffer, in insertion order.
    """
    for entry in entries:
        if entry.name in buffer:
            yield entry


def write_entries(entries: Iterable[TagEntry], stream: TextIO) -> int:
    """Write each entry as two lines: kind character, then name.

    Args:
        entries: Entries to write.
        stream: Text stream to write to.

    Returns:
        Number of entries written.
    """
    written = 0
    for entry in entries:
        stream.write(f"{entry.kind}\n{entry.name}\n")
        written += 1
    return written
