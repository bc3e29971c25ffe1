"""
QueryMapper - turn URL query strings into filter conditions.

Example:
    >>> from querymapper import FilterParser
    >>>
    >>> parser = FilterParser("/users", "age-min=18&name-lk=John&sort=name")
    >>> parser.has_query_parameter("sort")
    True
    >>> [c.key for c in parser.where_parameters()]
    ['age', 'name']
"""

from .core import (
    Comparator,
    FilterCondition,
    QueryMapperError,
    ParameterNotFoundError,
    MalformedSegmentError,
    ConfigurationError,
)

from .query import (
    PREDEFINED_PARAMETERS,
    FilterParser,
    parse_query_string,
    decompose_key,
    resolve_comparator,
    parse_segment,
)

__version__ = "0.1.0"
__author__ = "QueryMapper Team"

__all__ = [
    # Models
    "Comparator",
    "FilterCondition",
    # Parsing
    "PREDEFINED_PARAMETERS",
    "FilterParser",
    "parse_query_string",
    "decompose_key",
    "resolve_comparator",
    "parse_segment",
    # Exceptions
    "QueryMapperError",
    "ParameterNotFoundError",
    "MalformedSegmentError",
    "ConfigurationError",
]
