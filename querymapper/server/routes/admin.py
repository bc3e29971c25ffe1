"""
Health endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter

from ..models import HealthResponse

router = APIRouter()

_version = "0.1.0"


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the server is healthy and running.",
)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=_version)
