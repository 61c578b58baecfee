from datetime import datetime
from typing import Any, Dict, List

from pydantic import BaseModel, Field

from string_analyzer.models import AnalyzedString


class StringCreate(BaseModel):
    value: str = Field(..., min_length=1, description="String to analyze")


class StringPropertiesResponse(BaseModel):
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]


class StringResponse(BaseModel):
    id: str
    value: str
    properties: StringPropertiesResponse
    created_at: datetime

    @classmethod
    def from_record(cls, record: AnalyzedString) -> "StringResponse":
        return cls.model_validate(record.model_dump(exclude={"sequence"}))


class StringListResponse(BaseModel):
    data: List[StringResponse]
    count: int
    filters_applied: Dict[str, Any] = Field(default_factory=dict)


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict[str, Any]


class NaturalLanguageResponse(BaseModel):
    data: List[StringResponse]
    count: int
    interpreted_query: InterpretedQuery


class HealthResponse(BaseModel):
    status: str
    total_strings: int
