from typing import Iterable, List

from string_analyzer.models import AnalyzedString, StringFilters
from string_analyzer.utils import fold_case


def matches_filters(record: AnalyzedString, filters: StringFilters) -> bool:
    """Check if an analyzed string satisfies every filter that is set"""
    props = record.properties

    if filters.is_palindrome is not None and props.is_palindrome != filters.is_palindrome:
        return False

    if filters.min_length is not None and props.length < filters.min_length:
        return False

    if filters.max_length is not None and props.length > filters.max_length:
        return False

    if filters.word_count is not None and props.word_count != filters.word_count:
        return False

    if filters.contains_character is not None:
        if fold_case(filters.contains_character) not in props.character_frequency_map:
            return False

    return True


def apply_filters(records: Iterable[AnalyzedString], filters: StringFilters) -> List[AnalyzedString]:
    """Keep the records matching all filters, preserving their order"""
    return [record for record in records if matches_filters(record, filters)]
