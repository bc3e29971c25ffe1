"""
Core components for QueryMapper.
"""

from .condition import Comparator, FilterCondition
from .exceptions import (
    QueryMapperError,
    ParameterNotFoundError,
    MalformedSegmentError,
    ConfigurationError,
)

__all__ = [
    "Comparator",
    "FilterCondition",
    "QueryMapperError",
    "ParameterNotFoundError",
    "MalformedSegmentError",
    "ConfigurationError",
]
