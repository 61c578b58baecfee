from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from typing import Optional
import logging

from string_analyzer import crud, schemas
from string_analyzer.exceptions import (
    DuplicateStringError,
    QueryParseError,
    StringNotFoundError,
)
from string_analyzer.models import StringFilters
from string_analyzer.query_parser import parse_natural_language_query
from string_analyzer.store import StringStore, get_store

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/strings", response_model=schemas.StringResponse, status_code=status.HTTP_201_CREATED)
def create_string(
    string_data: schemas.StringCreate,
    store: StringStore = Depends(get_store)
):
    """
    Analyze and store a string.
    Returns 409 if string already exists.
    """
    try:
        record = crud.create_string_analysis(store, string_data.value)
    except DuplicateStringError as e:
        logger.info(f"Rejected duplicate string {e.string_id}")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={"error": "String already exists in the system"}
        )

    return schemas.StringResponse.from_record(record)


@router.get("/strings", response_model=schemas.StringListResponse)
def get_all_strings(
    is_palindrome: Optional[bool] = Query(None),
    min_length: Optional[int] = Query(None, ge=0),
    max_length: Optional[int] = Query(None, ge=0),
    word_count: Optional[int] = Query(None, ge=0),
    contains_character: Optional[str] = Query(None, min_length=1, max_length=1),
    store: StringStore = Depends(get_store)
):
    """
    Get all strings with optional filtering, oldest first.
    """
    filters = StringFilters(
        is_palindrome=is_palindrome,
        min_length=min_length,
        max_length=max_length,
        word_count=word_count,
        contains_character=contains_character,
    )
    strings = crud.get_all_strings(store, filters)
    data = [schemas.StringResponse.from_record(s) for s in strings]

    return schemas.StringListResponse(
        data=data,
        count=len(data),
        filters_applied=filters.applied()
    )


@router.get("/strings/filter-by-natural-language", response_model=schemas.NaturalLanguageResponse)
def filter_by_natural_language(
    query: str = Query(..., description="Natural language query"),
    store: StringStore = Depends(get_store)
):
    """
    Filter strings using natural language queries.
    Example: "all single word palindromic strings"
    """
    try:
        filters = parse_natural_language_query(query)
    except QueryParseError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "Unable to parse natural language query", "query": e.query}
        )

    strings = crud.get_all_strings(store, filters)
    data = [schemas.StringResponse.from_record(s) for s in strings]

    return schemas.NaturalLanguageResponse(
        data=data,
        count=len(data),
        interpreted_query=schemas.InterpretedQuery(
            original=query,
            parsed_filters=filters.applied()
        )
    )


@router.get("/strings/{string_value}", response_model=schemas.StringResponse)
def get_string(string_value: str, store: StringStore = Depends(get_store)):
    """
    Get analysis for a specific string.
    Returns 404 if string doesn't exist.
    """
    try:
        record = crud.get_string_by_value(store, string_value)
    except StringNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "String does not exist in the system"}
        )
    return schemas.StringResponse.from_record(record)


@router.delete("/strings/{string_value}", status_code=status.HTTP_204_NO_CONTENT)
def delete_string(string_value: str, store: StringStore = Depends(get_store)):
    """
    Delete a string from the system.
    Returns 404 if string doesn't exist.
    """
    try:
        crud.delete_string(store, string_value)
    except StringNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "String does not exist in the system"}
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)

