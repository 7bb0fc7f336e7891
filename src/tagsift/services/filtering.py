"""Tag filtering service.

Wires the pattern, language resolver, pipeline and buffer cross-reference
together for one request.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from loguru import logger

from ..core.types import TagEntry
from ..tags import (
    EquivalenceTable,
    FilterPipeline,
    LanguageResolver,
    build_tag_pattern,
    cross_reference,
)


@dataclass
class FilterRequest:
    """Everything the invoker supplies besides the tag lines and buffer.

    Attributes:
        language: Requested language (may be regex escaped, e.g. "C\\+\\+").
        order: Accepted kind characters.
        skip: Tag names to reject unconditionally.
        equivalences: Flattened (from, to) language pairs.
    """

    language: str
    order: str
    skip: list[str] = field(default_factory=list)
    equivalences: list[str] = field(default_factory=list)

    def build_pipeline(self) -> FilterPipeline:
        """Compile the pattern and assemble a fresh pipeline.

        Raises:
            PatternCompileError: If the language yields an invalid pattern.
        """
        table = EquivalenceTable.from_flat(self.equivalences)
        return FilterPipeline(
            pattern=build_tag_pattern(self.language),
            order=self.order,
            resolver=LanguageResolver(self.language, table),
            skip=self.skip,
        )


def filter_tags(
    request: FilterRequest, lines: Iterable[str], buffer: str
) -> list[TagEntry]:
    """Filter tag lines and keep the entries present in the buffer.

    Args:
        request: Filter parameters.
        lines: Raw tag lines in file order.
        buffer: Full text of the editor buffer.

    Returns:
        Entries to report, in first-seen order.
    """
    pipeline = request.build_pipeline()
    results = pipeline.run(lines)
    present = list(cross_reference(results, buffer))

    logger.debug(
        f"Accepted {len(results)} tags, {len(present)} present in buffer "
        f"({len(buffer)} chars)"
    )
    return present
