"""
API routes for QueryMapper server.
"""

from fastapi import APIRouter
from .filters import router as filters_router
from .admin import router as admin_router


def create_api_router() -> APIRouter:
    """Create the main API router with all sub-routers."""
    api_router = APIRouter()

    api_router.include_router(
        filters_router,
        prefix="/filters",
        tags=["Filters"],
    )
    api_router.include_router(
        admin_router,
        tags=["Admin"],
    )

    return api_router
