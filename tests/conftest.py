"""
Pytest fixtures shared by the test suite.

Every test gets its own store and application so no state leaks between tests.
"""
import pytest
from fastapi.testclient import TestClient

from string_analyzer.crud import create_string_analysis
from string_analyzer.main import create_app
from string_analyzer.store import StringStore


@pytest.fixture
def store() -> StringStore:
    return StringStore()


@pytest.fixture
def seeded_store(store: StringStore) -> StringStore:
    """Store holding 'radar', 'hello world' and 'level', in that order."""
    for value in ("radar", "hello world", "level"):
        create_string_analysis(store, value)
    return store


@pytest.fixture
def client(store: StringStore):
    with TestClient(create_app(store)) as c:
        yield c
