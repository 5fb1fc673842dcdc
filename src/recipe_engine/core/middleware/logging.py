"""Request logging middleware.

Binds method, path and client address to the logging context, so service
log lines for an import or reconciliation can be traced to the request,
and logs each request's start and outcome. Server errors are logged at
WARNING.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from recipe_engine.observability.logging import bind_context, get_logger


if TYPE_CHECKING:
    from collections.abc import Iterable

    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp


logger = get_logger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log requests, except for paths polled by infrastructure."""

    def __init__(self, app: ASGIApp, *, exclude_paths: Iterable[str]) -> None:
        super().__init__(app)
        self.exclude_paths = frozenset(exclude_paths)

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        path = request.url.path
        if path in self.exclude_paths:
            return await call_next(request)

        bind_context(
            method=request.method,
            path=path,
            client_ip=client_ip(request),
        )
        logger.info("Request started")

        response = await call_next(request)

        level = "WARNING" if response.status_code >= 500 else "INFO"
        logger.log(level, "Request completed", status_code=response.status_code)
        return response


def client_ip(request: Request) -> str:
    """Client address, preferring ``X-Forwarded-For`` then ``X-Real-IP``."""
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip

    return request.client.host if request.client else "unknown"
