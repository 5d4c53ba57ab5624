"""FastAPI middleware and logging setup."""

from __future__ import annotations

import logging
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

# Cache lifetimes in seconds
STATIC_MAX_AGE = 86400  # service info, stats, translation metadata
CONTENT_MAX_AGE = 604800  # chapters, verses, comparisons
SEARCH_MAX_AGE = 3600

STATIC_PATHS = {
    "/",
    "/api",
    "/api/info",
    "/api/stats",
    "/api/translations",
}

CONTENT_PREFIXES = (
    "/api/chapters",
    "/api/verses/",
    "/api/compare/",
)


def cache_max_age(path: str) -> int | None:
    """Cache lifetime for a request path, or None for uncached paths."""
    if path in STATIC_PATHS:
        return STATIC_MAX_AGE
    if path.startswith("/api/search"):
        return SEARCH_MAX_AGE
    if path.startswith(CONTENT_PREFIXES):
        return CONTENT_MAX_AGE
    if path.startswith("/api/translations/"):
        # /api/translations/{key} is metadata; anything deeper is text
        rest = path[len("/api/translations/") :].strip("/")
        return CONTENT_MAX_AGE if "/" in rest else STATIC_MAX_AGE
    return None


class CacheControlMiddleware(BaseHTTPMiddleware):
    """Set Cache-Control on successful GET responses.

    The corpus never changes while the process runs, so every successful
    read is cacheable; error responses are left alone.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        response = await call_next(request)

        if request.method != "GET" or response.status_code != 200:
            return response

        max_age = cache_max_age(request.url.path)
        if max_age is not None:
            response.headers["Cache-Control"] = f"public, max-age={max_age}"
        return response


def setup_logging(level: str = "info") -> None:
    """Configure root logging for the CLI and server."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(numeric_level)

    for name in ["uvicorn", "uvicorn.access", "uvicorn.error"]:
        logging.getLogger(name).setLevel(numeric_level)
