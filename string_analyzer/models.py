from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class StringProperties(BaseModel):
    """Computed properties of a string. Never recomputed once stored."""

    model_config = ConfigDict(frozen=True)

    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]


class AnalyzedString(BaseModel):
    """A stored string, keyed by the SHA-256 hash of its value"""

    model_config = ConfigDict(frozen=True)

    id: str
    value: str
    properties: StringProperties
    created_at: datetime
    # insertion counter, breaks created_at ties
    sequence: int


class StringFilters(BaseModel):
    """
    Structured filter set shared by the query-parameter and the
    natural language endpoints. Every field is optional; present
    fields are combined with AND.
    """

    model_config = ConfigDict(frozen=True)

    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_count: Optional[int] = None
    contains_character: Optional[str] = None

    def applied(self) -> Dict[str, Any]:
        """Only the filters that were actually set"""
        return self.model_dump(exclude_none=True)
