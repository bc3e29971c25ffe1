"""
Custom middleware for the QueryMapper server.
"""

from __future__ import annotations

import time
import logging
from typing import Callable
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("querymapper.server")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware to log request details and timing.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()

        logger.info(
            f"Request: {request.method} {request.url.path} "
            f"from {request.client.host if request.client else 'unknown'}"
        )

        response = await call_next(request)

        duration_ms = (time.time() - start_time) * 1000

        logger.info(
            f"Response: {response.status_code} "
            f"({duration_ms:.2f}ms)"
        )

        response.headers["X-Response-Time"] = f"{duration_ms:.2f}ms"

        return response
