"""Tag parsing, filtering and buffer cross-referencing."""

from .crossref import cross_reference, write_entries
from .languages import EquivalenceTable, LanguageResolver
from .pattern import (
    build_tag_pattern,
    is_c_family,
    language_fragment,
    tag_pattern_source,
)
from .pipeline import FilterPipeline, FilterStats, parse_tag_line
from .result_set import ResultSet

__all__ = [
    "build_tag_pattern",
    "is_c_family",
    "language_fragment",
    "tag_pattern_source",
    "EquivalenceTable",
    "LanguageResolver",
    "FilterPipeline",
    "FilterStats",
    "parse_tag_line",
    "ResultSet",
    "cross_reference",
    "write_entries",
]
