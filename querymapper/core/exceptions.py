"""
Custom exceptions for QueryMapper.
"""


class QueryMapperError(Exception):
    """Base exception for QueryMapper."""
    pass


class ParameterNotFoundError(QueryMapperError, LookupError):
    """No parsed condition has the requested key."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Query parameter '{key}' not found")


class MalformedSegmentError(QueryMapperError, ValueError):
    """A query string segment does not hold exactly one '='."""

    def __init__(self, segment: str):
        self.segment = segment
        super().__init__(
            f"Malformed query segment '{segment}': expected exactly one '='"
        )


class ConfigurationError(QueryMapperError):
    """Invalid settings."""
    pass
