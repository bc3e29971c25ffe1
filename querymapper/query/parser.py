"""
Query string parsing for QueryMapper.

Turns a decoded query string such as ``age-min=18&name-lk=John&sort=name``
into an ordered list of FilterConditions and separates the predefined
control parameters (sort, limit, page) from the WHERE filters.

Example:
    >>> parser = FilterParser("/users", "age-min=18&name-lk=John&sort=name")
    >>> [c.to_dict() for c in parser.where_parameters()]
    [{'key': 'age', 'operator': '>=', 'value': '18'},
     {'key': 'name', 'operator': 'like', 'value': 'John'}]
    >>> parser.query_parameter("sort").value
    'name'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterable, Iterator, List, Optional, Tuple
import logging

from ..core.condition import FilterCondition
from ..core.exceptions import MalformedSegmentError, ParameterNotFoundError
from .grammar import parse_segment, split_query_string

if TYPE_CHECKING:
    from config.settings import Settings

logger = logging.getLogger("querymapper.query")

# Keys with a request-control meaning; never treated as WHERE filters.
PREDEFINED_PARAMETERS: Tuple[str, ...] = (
    "sort",
    "limit",
    "page",
)


class FilterParser:
    """
    Parser for filter query strings.

    The query string is parsed once, in the constructor; the instance is
    read-only afterwards. Create one parser per request.

    Malformed segments (zero or several '=') are skipped with a warning and
    kept in ``malformed_segments``. Pass ``strict=True`` to raise
    MalformedSegmentError instead.

    Args:
        path_info: Request path, kept for context only
        query_string: Percent-decoded query string, or None
        predefined: Reserved control keys
        strict: Fail on the first malformed segment
        request_uri: Full request URI, kept for context only
    """

    def __init__(
        self,
        path_info: str = "",
        query_string: Optional[str] = None,
        predefined: Iterable[str] = PREDEFINED_PARAMETERS,
        strict: bool = False,
        request_uri: Optional[str] = None,
    ):
        self.path_info = path_info
        self.query_string = query_string or ""
        self.request_uri = request_uri
        self.strict = strict

        self._predefined: Tuple[str, ...] = tuple(predefined)
        self._conditions: List[FilterCondition] = []
        self._malformed: List[str] = []

        if self.query_string:
            self._parse(self.query_string)

        # Last occurrence wins for repeated keys.
        self._index: Dict[str, FilterCondition] = {}
        for condition in self._conditions:
            self._index[condition.key] = condition

    @classmethod
    def from_settings(
        cls,
        path_info: str,
        query_string: Optional[str],
        settings: "Settings",
        request_uri: Optional[str] = None,
    ) -> "FilterParser":
        """Create a parser using the reserved keys and strictness of settings."""
        return cls(
            path_info,
            query_string,
            predefined=settings.predefined_parameters,
            strict=settings.strict,
            request_uri=request_uri,
        )

    def _parse(self, query_string: str) -> None:
        for segment in split_query_string(query_string):
            try:
                self._conditions.append(parse_segment(segment))
            except MalformedSegmentError:
                if self.strict:
                    raise
                logger.warning(f"Skipping malformed query segment: {segment!r}")
                self._malformed.append(segment)

        logger.debug(
            f"Parsed {len(self._conditions)} conditions from {self.path_info or '/'} "
            f"({len(self._malformed)} malformed)"
        )

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def query_parameter(self, key: str) -> FilterCondition:
        """
        Get the condition for a key.

        Raises:
            ParameterNotFoundError: If no condition has that key
        """
        try:
            return self._index[key]
        except KeyError:
            raise ParameterNotFoundError(key) from None

    def find_parameter(self, key: str) -> Optional[FilterCondition]:
        """Get the condition for a key, or None when absent."""
        return self._index.get(key)

    def has_query_parameter(self, key: str) -> bool:
        return key in self._index

    def has_query_parameters(self) -> bool:
        return len(self._conditions) > 0

    def predefined_parameters(self) -> Tuple[str, ...]:
        return self._predefined

    def where_parameters(self) -> Tuple[FilterCondition, ...]:
        """Conditions whose key is not a predefined parameter, in input order."""
        return tuple(
            c for c in self._conditions if c.key not in self._predefined
        )

    # -------------------------------------------------------------------------
    # Views
    # -------------------------------------------------------------------------

    @property
    def conditions(self) -> Tuple[FilterCondition, ...]:
        return tuple(self._conditions)

    @property
    def malformed_segments(self) -> Tuple[str, ...]:
        return tuple(self._malformed)

    def __iter__(self) -> Iterator[FilterCondition]:
        return iter(self.conditions)

    def __len__(self) -> int:
        return len(self._conditions)

    def __repr__(self) -> str:
        return (
            f"FilterParser(path_info={self.path_info!r}, "
            f"conditions={len(self._conditions)})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "path": self.path_info,
            "conditions": [c.to_dict() for c in self._conditions],
            "where": [c.to_dict() for c in self.where_parameters()],
            "predefined": list(self._predefined),
            "malformed": list(self._malformed),
        }


def parse_query_string(
    query_string: Optional[str],
    predefined: Iterable[str] = PREDEFINED_PARAMETERS,
    strict: bool = False,
) -> Tuple[FilterCondition, ...]:
    """
    Parse a query string into conditions.

    Args:
        query_string: Percent-decoded query string
        predefined: Reserved control keys
        strict: Fail on malformed segments

    Returns:
        All parsed conditions in input order
    """
    return FilterParser("", query_string, predefined=predefined, strict=strict).conditions
