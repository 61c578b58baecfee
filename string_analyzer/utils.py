import hashlib
import re
from collections import Counter
from typing import Dict

from string_analyzer.models import StringProperties

# Characters ignored by the unique-character count and the frequency map
IGNORED_CHARACTERS = frozenset(" \t\n")

_WHITESPACE_RUN = re.compile(r"\s+")


def compute_sha256(text: str) -> str:
    """Compute SHA-256 hash of a string as lowercase hex"""
    return hashlib.sha256(text.encode("utf-8", "surrogatepass")).hexdigest()


def fold_case(text: str) -> str:
    """Lowercase one code point at a time, so the result has the same length"""
    folded = []
    for char in text:
        lowered = char.lower()
        # multi-character mappings (e.g. "\u0130") keep only the base letter
        folded.append(lowered if len(lowered) == 1 else lowered[0])
    return "".join(folded)


def is_palindrome(text: str) -> bool:
    """Check if string is palindrome (case-insensitive, ignoring all whitespace)"""
    cleaned = fold_case(_WHITESPACE_RUN.sub("", text))
    return cleaned == cleaned[::-1]


def _counted_characters(text: str):
    return (char for char in fold_case(text) if char not in IGNORED_CHARACTERS)


def count_unique_characters(text: str) -> int:
    """Count distinct lowercased characters, excluding space, tab and newline"""
    return len(set(_counted_characters(text)))


def count_words(text: str) -> int:
    """Count words separated by whitespace"""
    return len(text.split())


def get_character_frequency(text: str) -> Dict[str, int]:
    """Get frequency map of each lowercased character, excluding space, tab and newline"""
    return dict(Counter(_counted_characters(text)))


def analyze_string(value: str) -> StringProperties:
    """Analyze a string and return all computed properties"""
    return StringProperties(
        length=len(value),
        is_palindrome=is_palindrome(value),
        unique_characters=count_unique_characters(value),
        word_count=count_words(value),
        sha256_hash=compute_sha256(value),
        character_frequency_map=get_character_frequency(value),
    )
