"""
QueryMapper inspection server.

A FastAPI app that parses the query string of each request and returns the
resulting filter conditions.

Quick Start:
    >>> from querymapper.server import create_app, run_server
    >>>
    >>> app = create_app()
    >>> run_server(app, host="0.0.0.0", port=8000)

Or using command line:
    $ python -m querymapper.server --port 8000

Or with uvicorn:
    $ uvicorn querymapper.server.app:create_app --factory
"""

from .app import create_app
from .config import ServerConfig, get_config, set_config
from .dependencies import decode_query_string, parser_from_request, get_filter_parser
from .models import (
    ConditionResponse,
    FilterResponse,
    HealthResponse,
    ErrorResponse,
)

__all__ = [
    # App
    "create_app",
    "run_server",
    # Config
    "ServerConfig",
    "get_config",
    "set_config",
    # Request adapter
    "decode_query_string",
    "parser_from_request",
    "get_filter_parser",
    # Models
    "ConditionResponse",
    "FilterResponse",
    "HealthResponse",
    "ErrorResponse",
]


def run_server(
    app=None,
    host: str = "0.0.0.0",
    port: int = 8000,
    reload: bool = False,
    workers: int = 1,
    log_level: str = "info",
):
    """
    Run the QueryMapper server.

    Args:
        app: FastAPI application (creates default if None)
        host: Host to bind to
        port: Port to bind to
        reload: Enable auto-reload for development
        workers: Number of worker processes
        log_level: Logging level
    """
    import uvicorn

    if app is None:
        app = create_app()

    uvicorn.run(
        app,
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )
