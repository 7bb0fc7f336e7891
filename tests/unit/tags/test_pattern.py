"""Tests for tag pattern construction."""

import pytest

from tagsift.core.exceptions import PatternCompileError
from tagsift.tags.pattern import (
    build_tag_pattern,
    is_c_family,
    language_fragment,
    tag_pattern_source,
)
from tagsift.tags.pipeline import parse_tag_line


class TestLanguageFragment:
    """Tests for language_fragment()."""

    @pytest.mark.parametrize("language", ["C", "c", "C++", "c++", r"C\+\+"])
    def test_c_family_merged(self, language):
        """Any spelling of C or C++ matches both."""
        assert language_fragment(language) == r"(?:C\+\+|C)"

    @pytest.mark.parametrize("language", ["C", "c++", r"C\+\+"])
    def test_is_c_family(self, language):
        """C, C++ and the escaped C++ spelling are all C family."""
        assert is_c_family(language)

    @pytest.mark.parametrize("language", ["Cobol", "C#", "ObjectiveC", ""])
    def test_is_not_c_family(self, language):
        """Other languages, even ones starting with C, are not."""
        assert not is_c_family(language)

    def test_other_language_embedded_verbatim(self):
        """Other languages are embedded as given."""
        assert language_fragment("Python") == "Python"
        assert language_fragment(r"Objective\-C") == r"Objective\-C"

    def test_language_in_pattern_source(self):
        """Fragment ends up inside the language group."""
        source = tag_pattern_source("Go")
        assert "language:(Go" in source


class TestBuildTagPattern:
    """Tests for build_tag_pattern() and parse_tag_line()."""

    def test_extracts_name_kind_language(self, make_tag_line):
        """Should capture the three fields from an extended tag line."""
        pattern = build_tag_pattern("C")

        candidate = parse_tag_line(pattern, make_tag_line("foo", kind="f", language="C"))

        assert candidate is not None
        assert candidate.name == "foo"
        assert candidate.kind == "f"
        assert candidate.language == "C"

    def test_case_insensitive_language(self, make_tag_line):
        """Language in the tag line may differ in case."""
        pattern = build_tag_pattern("python")

        candidate = parse_tag_line(pattern, make_tag_line("run", language="Python"))

        assert candidate is not None
        assert candidate.language == "Python"

    def test_cpp_declaration_matches_c_request(self, make_tag_line):
        """C++ lines are parsed when C is requested."""
        pattern = build_tag_pattern("C")

        candidate = parse_tag_line(pattern, make_tag_line("Widget", kind="c", language="C++"))

        assert candidate is not None
        assert candidate.name == "Widget"
        assert candidate.language == "C++"

    def test_escaped_cpp_request(self, make_tag_line):
        """The escaped C\\+\\+ form compiles and parses C lines."""
        pattern = build_tag_pattern(r"C\+\+")

        assert parse_tag_line(pattern, make_tag_line("foo", language="C")) is not None

    @pytest.mark.parametrize("language", ["C++", r"C\+\+"])
    def test_cpp_request_captures_cpp_whole(self, language, make_tag_line):
        """A C++ declaration is captured as C++, not as its C prefix."""
        pattern = build_tag_pattern(language)

        candidate = parse_tag_line(pattern, make_tag_line("Widget", kind="c", language="C++"))

        assert candidate is not None
        assert candidate.language == "C++"

    def test_other_language_does_not_match(self, make_tag_line):
        """Lines for an unrelated language don't match."""
        pattern = build_tag_pattern("Python")

        assert parse_tag_line(pattern, make_tag_line("foo", language="Ruby")) is None

    def test_longer_language_name_captured_whole(self, make_tag_line):
        """JavaScript is captured in full when Java is requested."""
        pattern = build_tag_pattern("Java")

        candidate = parse_tag_line(pattern, make_tag_line("init", language="JavaScript"))

        assert candidate is not None
        assert candidate.language == "JavaScript"

    def test_line_without_language_field(self):
        """Lines lacking the language field don't match."""
        pattern = build_tag_pattern("C")

        assert parse_tag_line(pattern, 'foo\tmain.c\t/^int foo$/;"\tf') is None

    def test_line_number_address_does_not_match(self, make_tag_line):
        """Only search-pattern addresses are recognised."""
        pattern = build_tag_pattern("C")
        line = make_tag_line("foo", address="42")

        assert parse_tag_line(pattern, line) is None

    def test_invalid_language_raises(self):
        """A language that breaks the regex is a compile error."""
        with pytest.raises(PatternCompileError) as exc_info:
            build_tag_pattern("(")

        error = exc_info.value
        assert error.offset is not None
        assert "offset" in str(error)
        assert error.pattern == tag_pattern_source("(")
