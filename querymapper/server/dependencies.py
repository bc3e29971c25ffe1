"""
FastAPI dependencies for the QueryMapper server.

The request layer owns percent-decoding: the query string is decoded once
here and handed to FilterParser, which never decodes again.
"""

from __future__ import annotations

from typing import Optional
from urllib.parse import unquote

from fastapi import Depends, HTTPException, Request

from .config import get_config, ServerConfig
from ..core.exceptions import MalformedSegmentError
from ..query.parser import FilterParser


def decode_query_string(raw: Optional[str]) -> str:
    """
    Percent-decode a raw query string.

    '+' is left as is; only %XX escapes are decoded.
    """
    if not raw:
        return ""
    return unquote(raw)


def parser_from_request(
    request: Request,
    config: Optional[ServerConfig] = None,
) -> FilterParser:
    """
    Build a FilterParser for an incoming request.

    Raises:
        MalformedSegmentError: In strict mode, if a segment is malformed
    """
    config = config or get_config()
    url = request.url

    request_uri = url.path
    if url.query:
        request_uri = f"{url.path}?{url.query}"

    return FilterParser(
        url.path,
        decode_query_string(url.query),
        predefined=config.predefined_parameters,
        strict=config.strict,
        request_uri=request_uri,
    )


async def get_filter_parser(
    request: Request,
    config: ServerConfig = Depends(lambda: get_config()),
) -> FilterParser:
    """
    Dependency to get the parsed filters of the current request.

    Raises HTTPException 400 if a segment is malformed in strict mode.
    """
    try:
        return parser_from_request(request, config)
    except MalformedSegmentError as e:
        raise HTTPException(status_code=400, detail=str(e))
