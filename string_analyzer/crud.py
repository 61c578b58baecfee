from datetime import datetime, timezone
from typing import List

from string_analyzer.filters import apply_filters
from string_analyzer.models import AnalyzedString, StringFilters
from string_analyzer.store import StringStore
from string_analyzer.utils import analyze_string, compute_sha256


def create_string_analysis(store: StringStore, value: str) -> AnalyzedString:
    """Analyze a string and store the result"""
    properties = analyze_string(value)
    return store.insert(value, properties, now=datetime.now(timezone.utc))


def get_string_by_value(store: StringStore, value: str) -> AnalyzedString:
    """Get string analysis by its raw value"""
    return store.get_by_value(value)


def get_all_strings(store: StringStore, filters: StringFilters) -> List[AnalyzedString]:
    """Get all strings in creation order, narrowed by the given filters"""
    return apply_filters(store.list_all(), filters)


def delete_string(store: StringStore, value: str) -> None:
    """Delete string analysis by its raw value"""
    store.delete(compute_sha256(value))
