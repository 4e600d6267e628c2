"""API middleware for authentication."""

import logging
import secrets
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse

from hexnote.core.config import HEXNOTE_API_KEY

logger = logging.getLogger(__name__)

# Paths that don't require authentication
PUBLIC_PATHS = {"/api/v1/health", "/docs", "/openapi.json", "/redoc"}


async def api_key_middleware(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """
    Middleware to validate API key authentication.

    Checks the X-API-Key header against HEXNOTE_API_KEY. Without a configured
    key the API is meant for the local desktop app and requests pass through.
    """
    path = request.url.path

    # Allow public paths without authentication
    if path in PUBLIC_PATHS or path.startswith("/docs") or path.startswith("/redoc"):
        return await call_next(request)

    if not HEXNOTE_API_KEY:
        return await call_next(request)

    api_key = request.headers.get("X-API-Key")

    if not api_key:
        return JSONResponse(
            status_code=401,
            content={"detail": "Missing X-API-Key header"},
        )

    if not secrets.compare_digest(api_key, HEXNOTE_API_KEY):
        return JSONResponse(
            status_code=401,
            content={"detail": "Invalid API key"},
        )

    return await call_next(request)
