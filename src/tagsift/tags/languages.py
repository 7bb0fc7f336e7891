"""Language compatibility between tags and the requested buffer language.

The invoker can declare that tags of one language are valid in a buffer of
another language (e.g. C headers used from C++) through an equivalence
table of (from, to) pairs.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from loguru import logger

from .pattern import is_c_family


class EquivalenceTable:
    """Ordered (from_language, to_language) pairs.

    A pair means tags declared in ``from_language`` are acceptable when
    ``to_language`` is requested. Pairs are directional and compared
    case-insensitively.

    Example:
        table = EquivalenceTable.from_flat(["C", "C++", "Vim", "Lua"])
        table.relates("c", "c++")  # True
        table.relates("C++", "C")  # False (directional)
    """

    def __init__(self, pairs: Iterable[tuple[str, str]] = ()) -> None:
        """Initialize with an iterable of (from, to) pairs."""
        self._pairs: list[tuple[str, str]] = []
        for source, target in pairs:
            self.add(source, target)

    @classmethod
    def from_flat(cls, values: list[str]) -> EquivalenceTable:
        """Build a table from a flattened ``from, to, from, to`` sequence.

        Args:
            values: Alternating from/to language names.

        Returns:
            Table with one pair per consecutive two values. An unpaired
            trailing value is dropped.
        """
        if len(values) % 2:
            logger.warning(
                f"Ignoring unpaired language equivalence entry: {values[-1]!r}"
            )
            values = values[:-1]
        return cls(zip(values[0::2], values[1::2]))

    def add(self, source: str, target: str) -> None:
        """Append a pair.

        Args:
            source: Declared language whose tags become acceptable.
            target: Requested language that accepts them.
        """
        self._pairs.append((source.lower(), target.lower()))

    def relates(self, declared: str, requested: str) -> bool:
        """Check whether some pair maps ``declared`` to ``requested``."""
        key = (declared.lower(), requested.lower())
        return any(pair == key for pair in self._pairs)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)


class LanguageResolver:
    """Decide whether a tag's declared language fits the requested language.

    Resolution order:
    1. Case-insensitive equality with the requested language.
    2. Both languages are spellings of C or C++ (including the escaped
       ``C\\+\\+``), since the tag pattern merges the two.
    3. A pair in the equivalence table relating declared to requested.
    """

    def __init__(
        self, requested: str, equivalences: EquivalenceTable | None = None
    ) -> None:
        """Initialize resolver.

        Args:
            requested: Language of the buffer being filtered for.
            equivalences: Optional cross-language equivalence table.
        """
        self.requested = requested
        self.equivalences = equivalences or EquivalenceTable()
        self._requested_key = requested.lower()
        self._c_family = is_c_family(requested)

    def accepts(self, declared: str) -> bool:
        """Check whether tags declared in ``declared`` are acceptable.

        Args:
            declared: Language captured from the tag line.

        Returns:
            True if the language matches directly, as C/C++, or via an
            equivalence.
        """
        if declared.lower() == self._requested_key:
            return True
        if self._c_family and is_c_family(declared):
            return True
        return self.equivalences.relates(declared, self.requested)
