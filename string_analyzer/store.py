"""
In-memory storage for analyzed strings.

Records are keyed by the SHA-256 hash of their value. A single lock
serialises inserts, deletes and enumeration so no caller ever sees the
store mid-mutation.
"""
import itertools
import logging
import threading
from datetime import datetime, timezone
from typing import Dict, List, Optional

from fastapi import Request

from string_analyzer.exceptions import DuplicateStringError, StringNotFoundError
from string_analyzer.models import AnalyzedString, StringProperties
from string_analyzer.utils import compute_sha256

logger = logging.getLogger(__name__)


class StringStore:
    def __init__(self) -> None:
        self._records: Dict[str, AnalyzedString] = {}
        self._lock = threading.Lock()
        self._sequence = itertools.count()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def insert(
        self,
        value: str,
        properties: StringProperties,
        now: Optional[datetime] = None,
    ) -> AnalyzedString:
        """Store a new record; raises DuplicateStringError if the hash is taken"""
        string_id = compute_sha256(value)
        created_at = now or datetime.now(timezone.utc)

        with self._lock:
            if string_id in self._records:
                raise DuplicateStringError(string_id)

            record = AnalyzedString(
                id=string_id,
                value=value,
                properties=properties,
                created_at=created_at,
                sequence=next(self._sequence),
            )
            self._records[string_id] = record

        logger.info(f"Stored string {string_id}")
        return record

    def get_by_id(self, string_id: str) -> AnalyzedString:
        with self._lock:
            record = self._records.get(string_id)
        if record is None:
            raise StringNotFoundError(string_id)
        return record

    def get_by_value(self, value: str) -> AnalyzedString:
        string_id = compute_sha256(value)
        with self._lock:
            record = self._records.get(string_id)
        if record is None:
            raise StringNotFoundError(string_id, value=value)
        return record

    def delete(self, string_id: str) -> None:
        with self._lock:
            if self._records.pop(string_id, None) is None:
                raise StringNotFoundError(string_id)
        logger.info(f"Deleted string {string_id}")

    def list_all(self) -> List[AnalyzedString]:
        """All records, oldest first; insertion order breaks timestamp ties"""
        with self._lock:
            records = list(self._records.values())
        return sorted(records, key=lambda record: (record.created_at, record.sequence))


def get_store(request: Request) -> StringStore:
    """Dependency to provide the application's store."""
    return request.app.state.store
