"""
Query string parsing for QueryMapper.

This module provides:
- The filter key grammar (prefix/postfix tokens and comparator resolution)
- FilterParser, which turns a decoded query string into filter conditions

Example:
    >>> from querymapper.query import FilterParser
    >>>
    >>> parser = FilterParser("/users", "age-min=18&status=null&page=2")
    >>> for condition in parser.where_parameters():
    ...     print(condition.key, condition.operator, condition.value)
    age >= 18
    status NULL null
"""

from .grammar import (
    PREFIXES,
    POSTFIXES,
    KeyParts,
    decompose_key,
    is_null_literal,
    resolve_comparator,
    split_query_string,
    split_segment,
    parse_segment,
)

from .parser import (
    PREDEFINED_PARAMETERS,
    FilterParser,
    parse_query_string,
)

__all__ = [
    # Grammar
    "PREFIXES",
    "POSTFIXES",
    "KeyParts",
    "decompose_key",
    "is_null_literal",
    "resolve_comparator",
    "split_query_string",
    "split_segment",
    "parse_segment",
    # Parser
    "PREDEFINED_PARAMETERS",
    "FilterParser",
    "parse_query_string",
]
