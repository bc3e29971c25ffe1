"""
Filter condition records produced by the query string parser.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple


class Comparator(str, Enum):
    """Comparators handed to the query-building layer."""

    EQ = "="
    NE = "!="
    LT = "<"
    GT = ">"
    GTE = ">="
    LTE = "<="
    LIKE = "like"
    NOT_LIKE = "not like"
    IN = "IN"
    NOT_IN = "NOT IN"
    NULL = "NULL"
    NOT_NULL = "NOT NULL"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class FilterCondition:
    """
    One parsed query parameter.

    Attributes:
        key: Base field name with prefix and postfix stripped
        operator: Resolved comparator
        value: Raw value string, never converted
        raw_key: Key text as it appeared in the query string
    """

    key: str
    operator: Comparator = Comparator.EQ
    value: str = ""
    raw_key: str = field(default="", compare=False)

    @property
    def is_null_check(self) -> bool:
        """Whether the condition tests for (NOT) NULL instead of a value."""
        return self.operator in (Comparator.NULL, Comparator.NOT_NULL)

    def to_pair(self) -> Tuple[str, str]:
        """Return the ``(key, value)`` pair as written in the query string."""
        return (self.raw_key or self.key, self.value)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the ``{key, operator, value}`` output record."""
        return {
            "key": self.key,
            "operator": self.operator.value,
            "value": self.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FilterCondition":
        """Create a condition from its dictionary representation."""
        return cls(
            key=data["key"],
            operator=Comparator(data.get("operator", Comparator.EQ.value)),
            value=data.get("value", ""),
            raw_key=data.get("raw_key", ""),
        )
