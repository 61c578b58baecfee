"""Tests for structured filtering over stored strings."""
from string_analyzer.crud import create_string_analysis
from string_analyzer.filters import apply_filters, matches_filters
from string_analyzer.models import StringFilters


def _values(records):
    return [record.value for record in records]


class TestMatchesFilters:
    def test_empty_filters_match_everything(self, seeded_store):
        records = seeded_store.list_all()
        assert all(matches_filters(record, StringFilters()) for record in records)

    def test_palindrome_and_word_count(self, seeded_store):
        filters = StringFilters(is_palindrome=True, word_count=1)
        assert _values(apply_filters(seeded_store.list_all(), filters)) == ["radar", "level"]

    def test_exact_length_bounds(self, seeded_store):
        filters = StringFilters(is_palindrome=True, word_count=1, min_length=5, max_length=5)
        assert _values(apply_filters(seeded_store.list_all(), filters)) == ["radar", "level"]

    def test_max_length_excludes_all(self, seeded_store):
        filters = StringFilters(is_palindrome=True, word_count=1, max_length=4)
        assert apply_filters(seeded_store.list_all(), filters) == []

    def test_not_palindrome(self, seeded_store):
        filters = StringFilters(is_palindrome=False)
        assert _values(apply_filters(seeded_store.list_all(), filters)) == ["hello world"]

    def test_min_length(self, seeded_store):
        filters = StringFilters(min_length=6)
        assert _values(apply_filters(seeded_store.list_all(), filters)) == ["hello world"]

    def test_contains_character(self, seeded_store):
        filters = StringFilters(contains_character="w")
        assert _values(apply_filters(seeded_store.list_all(), filters)) == ["hello world"]

    def test_contains_character_is_case_insensitive(self, seeded_store):
        filters = StringFilters(contains_character="R")
        assert _values(apply_filters(seeded_store.list_all(), filters)) == ["radar", "hello world"]

    def test_contains_space_never_matches(self, seeded_store):
        filters = StringFilters(contains_character=" ")
        assert apply_filters(seeded_store.list_all(), filters) == []


class TestStringFilters:
    def test_applied_skips_unset(self):
        filters = StringFilters(min_length=3, is_palindrome=False)
        assert filters.applied() == {"min_length": 3, "is_palindrome": False}


class TestContainsCharacterFolding:
    def test_dotted_capital_i_matches_plain_i(self, store):
        create_string_analysis(store, "\u0130stanbul")
        filters = StringFilters(contains_character="\u0130")
        assert _values(apply_filters(store.list_all(), filters)) == ["\u0130stanbul"]
