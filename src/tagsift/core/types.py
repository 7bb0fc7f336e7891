"""Type definitions for tagsift."""

from dataclasses import dataclass
from enum import Enum


class Verdict(Enum):
    """Outcome of filtering a single tag line."""

    ACCEPTED = "accepted"
    SKIPPED = "skipped"  # comment or empty line
    NO_MATCH = "no-match"
    WRONG_KIND = "wrong-kind"
    WRONG_LANGUAGE = "wrong-language"
    SKIP_LISTED = "skip-listed"
    DUPLICATE = "duplicate"


@dataclass(frozen=True)
class TagCandidate:
    """Fields extracted from one tag line before filtering.

    Attributes:
        name: Tag name (first tab-separated field).
        kind: Single kind character, e.g. "f" for function.
        language: Language declared by the ``language:`` field.
    """

    name: str
    kind: str
    language: str

    def to_entry(self) -> "TagEntry":
        """Convert to the persisted (kind, name) form."""
        return TagEntry(kind=self.kind, name=self.name)


@dataclass(frozen=True)
class TagEntry:
    """An accepted tag, identified by its kind and name."""

    kind: str
    name: str

    @property
    def key(self) -> str:
        """Identity of the entry: kind character followed by the name."""
        return f"{self.kind}{self.name}"

    def __str__(self) -> str:
        return f"{self.kind}\n{self.name}"
