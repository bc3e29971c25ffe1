"""
Main FastAPI application for QueryMapper.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

from .config import get_config, set_config, ServerConfig
from .routes import create_api_router
from .middleware import RequestLoggingMiddleware
from .models import ErrorResponse
from ..utils.logging import setup_logger

logger = logging.getLogger("querymapper")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    config = get_config()
    logger.info("Starting QueryMapper server...")
    logger.info(f"Predefined parameters: {', '.join(config.predefined_parameters)}")
    logger.info(f"Strict parsing: {config.strict}")

    yield

    logger.info("QueryMapper server stopped")


def create_app(config: ServerConfig = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        config: Optional server configuration

    Returns:
        FastAPI application instance
    """
    if config:
        set_config(config)

    config = get_config()
    setup_logger("querymapper", level=config.log_level)

    app = FastAPI(
        title="QueryMapper API",
        description="Inspect how URL query strings map to filter conditions.",
        version="0.1.0",
        docs_url="/docs" if config.docs_enabled else None,
        redoc_url="/redoc" if config.docs_enabled else None,
        openapi_url="/openapi.json" if config.docs_enabled else None,
        lifespan=lifespan,
    )

    app.add_middleware(RequestLoggingMiddleware)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        error = ErrorResponse(
            error="Internal server error",
            detail=str(exc) if config.log_level.upper() == "DEBUG" else None,
        )
        return JSONResponse(status_code=500, content=error.model_dump())

    api_router = create_api_router()
    app.include_router(api_router, prefix=config.api_prefix)

    @app.get("/", include_in_schema=False)
    async def root():
        return {
            "name": "QueryMapper",
            "version": "0.1.0",
            "docs": "/docs",
            "api": config.api_prefix,
        }

    return app

