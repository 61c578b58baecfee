from typing import Optional


class StringAnalyzerError(Exception):
    """Base error for the string analyzer service"""


class DuplicateStringError(StringAnalyzerError):
    def __init__(self, string_id: str):
        self.string_id = string_id
        super().__init__(f"String with id {string_id} already exists")


class StringNotFoundError(StringAnalyzerError):
    def __init__(self, string_id: str, value: Optional[str] = None):
        self.string_id = string_id
        self.value = value
        super().__init__(f"String with id {string_id} does not exist")


class QueryParseError(StringAnalyzerError):
    """Raised when no filter can be derived from a natural language query"""

    def __init__(self, query: str):
        self.query = query
        super().__init__(f"Unable to parse natural language query: {query!r}")

