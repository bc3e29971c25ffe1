"""
Pydantic models for API responses.
"""

from __future__ import annotations

from pydantic import BaseModel
from typing import List, Optional

from ..core.condition import Comparator, FilterCondition


class ErrorResponse(BaseModel):
    """Error response."""
    success: bool = False
    error: str
    detail: Optional[str] = None


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


class ConditionResponse(BaseModel):
    """A single parsed filter condition."""
    key: str
    operator: Comparator
    value: str

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"key": "age", "operator": ">=", "value": "18"}
            ]
        }
    }

    @classmethod
    def from_condition(cls, condition: FilterCondition) -> "ConditionResponse":
        return cls(
            key=condition.key,
            operator=condition.operator,
            value=condition.value,
        )


class FilterResponse(BaseModel):
    """Parsed query string of a request."""
    path: str
    conditions: List[ConditionResponse]
    where: List[ConditionResponse]
    predefined: List[str]
    malformed: List[str] = []
