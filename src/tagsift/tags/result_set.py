"""Insertion-ordered, duplicate-free collection of accepted tags."""

from typing import Iterable, Iterator

from ..core.types import TagEntry


class ResultSet:
    """Ordered set of TagEntry values keyed on kind + name.

    The first entry added for a given key wins; later duplicates are
    ignored. Iteration follows insertion order.

    Example:
        results = ResultSet()
        results.add(TagEntry("f", "main"))  # True
        results.add(TagEntry("f", "main"))  # False (duplicate)
        results.add(TagEntry("v", "main"))  # True (different kind)
    """

    def __init__(self, entries: Iterable[TagEntry] = ()) -> None:
        self._entries: dict[str, TagEntry] = {}
        for entry in entries:
            self.add(entry)

    def add(self, entry: TagEntry) -> bool:
        """Add an entry unless one with the same key is present.

        Args:
            entry: Entry to insert.

        Returns:
            True if the entry was inserted, False if it was a duplicate.
        """
        if entry.key in self._entries:
            return False
        self._entries[entry.key] = entry
        return True

    def __contains__(self, entry: object) -> bool:
        if not isinstance(entry, TagEntry):
            return False
        return entry.key in self._entries

    def __iter__(self) -> Iterator[TagEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ResultSet({list(self._entries.values())!r})"
