"""
Filter inspection endpoints.

Both endpoints parse the query string of the request they receive, so
``GET /filters?age-min=18&sort=name`` echoes back the conditions a data
layer would get for ``?age-min=18&sort=name``.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..models import ConditionResponse, FilterResponse
from ..dependencies import get_filter_parser
from ...core.exceptions import ParameterNotFoundError
from ...query.parser import FilterParser

router = APIRouter()


@router.get(
    "",
    response_model=FilterResponse,
    summary="Parse filters",
    description="Parse the request's query string into filter conditions.",
)
async def parse_filters(
    parser: FilterParser = Depends(get_filter_parser),
):
    """Return all conditions, the WHERE subset and the predefined keys."""
    return FilterResponse(
        path=parser.path_info,
        conditions=[ConditionResponse.from_condition(c) for c in parser.conditions],
        where=[ConditionResponse.from_condition(c) for c in parser.where_parameters()],
        predefined=list(parser.predefined_parameters()),
        malformed=list(parser.malformed_segments),
    )


@router.get(
    "/{key}",
    response_model=ConditionResponse,
    summary="Get filter",
    description="Get the condition parsed for a single key.",
)
async def get_filter(
    key: str,
    parser: FilterParser = Depends(get_filter_parser),
):
    """Get one condition by its base key (last occurrence wins)."""
    try:
        condition = parser.query_parameter(key)
    except ParameterNotFoundError:
        raise HTTPException(
            status_code=404,
            detail=f"Query parameter '{key}' not found"
        )
    return ConditionResponse.from_condition(condition)
