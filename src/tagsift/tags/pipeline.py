"""Tag filtering pipeline.

Every tag line goes through the same fixed sequence of checks, stopping at
the first one that fails:

1. Skip comment (``!``) and empty lines
2. Match the tag pattern
3. Kind must be in the accepted kind set ("order")
4. Declared language must resolve against the requested language
5. Name must not be in the skip list
6. (kind, name) must not already be accepted

Duplicate detection runs last so that lines rejected for any other reason
never reach the duplicate index.

Typical usage:

    from tagsift.tags import FilterPipeline, LanguageResolver, build_tag_pattern

    pipeline = FilterPipeline(
        pattern=build_tag_pattern("Python"),
        order="cfm",
        resolver=LanguageResolver("Python"),
        skip={"self"},
    )
    results = pipeline.run(lines)
"""

import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable

from loguru import logger

from ..core.types import TagCandidate, TagEntry, Verdict
from .languages import LanguageResolver
from .pattern import TAG_GROUP_KIND, TAG_GROUP_LANGUAGE, TAG_GROUP_NAME
from .result_set import ResultSet

_COMMENT_PREFIX = "!"


@dataclass
class FilterStats:
    """Tally of verdicts produced during one pipeline run."""

    counts: Counter = field(default_factory=Counter)

    def record(self, verdict: Verdict) -> None:
        self.counts[verdict] += 1

    def __getitem__(self, verdict: Verdict) -> int:
        return self.counts[verdict]

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def summary(self) -> str:
        """One-line human readable summary, in verdict declaration order."""
        parts = [f"{v.value}={self.counts[v]}" for v in Verdict if self.counts[v]]
        return f"{self.total} lines: " + (", ".join(parts) or "none")


def parse_tag_line(pattern: re.Pattern[str], line: str) -> TagCandidate | None:
    """Extract name, kind and language from a tag line.

    Args:
        pattern: Compiled pattern from build_tag_pattern.
        line: One raw tag line without its newline.

    Returns:
        TagCandidate, or None if the line does not match.
    """
    match = pattern.match(line)
    if match is None:
        return None
    return TagCandidate(
        name=match.group(TAG_GROUP_NAME),
        kind=match.group(TAG_GROUP_KIND)[0],
        language=match.group(TAG_GROUP_LANGUAGE),
    )


class FilterPipeline:
    """Filters raw tag lines into an ordered, duplicate-free ResultSet.

    The pipeline owns its ResultSet, so duplicate detection spans every
    call to evaluate() or run() on the same instance.
    """

    def __init__(
        self,
        pattern: re.Pattern[str],
        order: Iterable[str],
        resolver: LanguageResolver,
        skip: Iterable[str] = (),
    ):
        """Initialize the pipeline.

        Args:
            pattern: Compiled tag pattern for the requested language.
            order: Accepted kind characters (a string works).
            resolver: Language compatibility check.
            skip: Tag names that are always rejected.
        """
        self.pattern = pattern
        self.order = frozenset(order)
        self.resolver = resolver
        self.skip = frozenset(skip)
        self.results = ResultSet()
        self.stats = FilterStats()

    def evaluate(self, line: str) -> Verdict:
        """Run one tag line through the checks, accepting it if all pass.

        Args:
            line: Raw tag line.

        Returns:
            Verdict describing what happened to the line.
        """
        verdict = self._evaluate(line)
        self.stats.record(verdict)
        return verdict

    def _evaluate(self, line: str) -> Verdict:
        if not line or line.startswith(_COMMENT_PREFIX):
            return Verdict.SKIPPED

        candidate = parse_tag_line(self.pattern, line)
        if candidate is None:
            return Verdict.NO_MATCH

        if candidate.kind not in self.order:
            logger.debug(f"Tag '{candidate.name}' not in order.")
            return Verdict.WRONG_KIND

        if not self.resolver.accepts(candidate.language):
            logger.debug(f"Tag '{candidate.name}' is the wrong language.")
            return Verdict.WRONG_LANGUAGE

        if candidate.name in self.skip:
            logger.debug(f"Tag '{candidate.name}' is in skip list.")
            return Verdict.SKIP_LISTED

        entry: TagEntry = candidate.to_entry()
        if not self.results.add(entry):
            logger.debug(f"Tag '{candidate.name}' is a duplicate.")
            return Verdict.DUPLICATE

        logger.debug(
            f"Tag '{candidate.name}' is acceptable! It is type '{candidate.kind}'."
        )
        return Verdict.ACCEPTED

    def run(self, lines: Iterable[str]) -> ResultSet:
        """Filter every line and return the accumulated results.

        Args:
            lines: Raw tag lines, in file order.

        Returns:
            ResultSet of accepted entries in first-seen order.
        """
        for line in lines:
            self.evaluate(line)

        logger.debug(f"Filtered {self.stats.summary()}")
        return self.results
