"""Tag line pattern construction.

A ctags line looks like::

    name<TAB>file<TAB>/^search pattern$/;"<TAB>kind<TAB>language:LANG

One compiled pattern per run extracts the tag name, the kind character and
the declared language from such a line.
"""

import re

from loguru import logger

from ..core.exceptions import PatternCompileError

# Group 1: tag name, group 2: kind character, group 3: declared language
_PATTERN_HEAD = r'^([^\t]+)\t(?:[^\t]+)\t\/(?:.+)\/;"\t(\w)\tlanguage:('
# Trailing letters keep a longer language name (JavaScript vs Java) whole
_PATTERN_TAIL = r"(?:[a-zA-Z]+)?)"

_C_FAMILY = {"c", "c++", r"c\+\+"}
_C_FAMILY_FRAGMENT = r"(?:C\+\+|C)"

TAG_GROUP_NAME = 1
TAG_GROUP_KIND = 2
TAG_GROUP_LANGUAGE = 3


def is_c_family(language: str) -> bool:
    """Check whether a language is any spelling of C or C++."""
    return language.lower() in _C_FAMILY


def language_fragment(language: str) -> str:
    """Return the regex fragment used for the requested language.

    C and C++ tags are interchangeable, so any spelling of either one
    (including the regex-escaped ``C\\+\\+``) yields a fragment matching both.
    Any other language is embedded verbatim.

    Args:
        language: Requested language as supplied by the invoker.

    Returns:
        Regex source for the language part of the pattern.
    """
    if is_c_family(language):
        return _C_FAMILY_FRAGMENT
    return language


def tag_pattern_source(language: str) -> str:
    """Build the uncompiled tag pattern for a requested language."""
    return f"{_PATTERN_HEAD}{language_fragment(language)}{_PATTERN_TAIL}"


def build_tag_pattern(language: str) -> re.Pattern[str]:
    """Compile the case-insensitive tag pattern for a requested language.

    The language is only used to anchor parsing of the ``language:`` field.
    Whether a captured language is acceptable is decided afterwards by
    LanguageResolver.

    Args:
        language: Requested language, possibly already regex escaped.

    Returns:
        Compiled pattern with name, kind and language groups.

    Raises:
        PatternCompileError: If the language makes the pattern invalid.
    """
    source = tag_pattern_source(language)
    try:
        compiled = re.compile(source, re.IGNORECASE)
    except re.error as e:
        raise PatternCompileError(e.msg, e.pos, source) from e

    logger.debug(f"Compiled tag pattern for language {language!r}: {source}")
    return compiled
