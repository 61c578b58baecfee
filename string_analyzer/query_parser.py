"""
Natural language query parsing.

Translates free text such as "all single word palindromic strings" into a
StringFilters instance using a small, fixed vocabulary. Each matcher below
looks at the lowercased query on its own and yields at most one
(filter, value) pair. Matchers run in declaration order, so when two of them
set the same filter the later one wins.
"""
import logging
import re
from typing import Any, Callable, List, Optional, Tuple

from string_analyzer.exceptions import QueryParseError
from string_analyzer.models import StringFilters

logger = logging.getLogger(__name__)

Match = Optional[Tuple[str, Any]]
Matcher = Callable[[str], Match]

LONGER_THAN = re.compile(r"longer than (\d+)")
SHORTER_THAN = re.compile(r"shorter than (\d+)")
CONTAINS_LETTER = re.compile(
    r"(?:contain(?:s|ing)?|with) (?:the )?(?:letter |character )?'?([a-z])'?(?![a-z])"
)


def _phrase(filter_name: str, value: Any, *phrases: str) -> Matcher:
    """Matcher setting filter_name to value when any phrase occurs in the query"""

    def match(query: str) -> Match:
        if any(phrase in query for phrase in phrases):
            return filter_name, value
        return None

    return match


def _longer_than(query: str) -> Match:
    found = LONGER_THAN.search(query)
    if found:
        return "min_length", int(found.group(1)) + 1
    return None


def _shorter_than(query: str) -> Match:
    found = SHORTER_THAN.search(query)
    if found:
        return "max_length", int(found.group(1)) - 1
    return None


def _contains_letter(query: str) -> Match:
    found = CONTAINS_LETTER.search(query)
    if found:
        return "contains_character", found.group(1)
    return None


MATCHERS: List[Matcher] = [
    _phrase("word_count", 1, "single word"),
    _phrase("word_count", 2, "two word", "2 word"),
    _phrase("word_count", 3, "three word", "3 word"),
    _phrase("is_palindrome", True, "palindrom"),
    _longer_than,
    _shorter_than,
    _contains_letter,
    _phrase("contains_character", "a", "first vowel"),
    _phrase("contains_character", "u", "last vowel"),
]


def parse_natural_language_query(query: str) -> StringFilters:
    """
    Parse natural language query into filter parameters

    Examples:
    - "all single word palindromic strings" -> {word_count: 1, is_palindrome: true}
    - "strings longer than 10 characters" -> {min_length: 11}
    - "strings containing the letter z" -> {contains_character: "z"}

    Raises QueryParseError when no filter can be derived.
    """
    text = query.lower()
    parsed = {}

    for matcher in MATCHERS:
        result = matcher(text)
        if result is not None:
            name, value = result
            parsed[name] = value

    if not parsed:
        logger.info(f"No filters recognised in query {query!r}")
        raise QueryParseError(query)

    return StringFilters(**parsed)
