"""Request timing middleware."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from recipe_engine.observability.logging import get_logger


if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.responses import Response


logger = get_logger(__name__)

PROCESS_TIME_HEADER = "X-Process-Time"

# Same as the default upstream fetch timeout.
SLOW_REQUEST_THRESHOLD_MS = 15_000.0


class TimingMiddleware(BaseHTTPMiddleware):
    """Report processing time in ``X-Process-Time`` and log slow requests."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)

        response.headers[PROCESS_TIME_HEADER] = f"{elapsed_ms}ms"
        if elapsed_ms > SLOW_REQUEST_THRESHOLD_MS:
            logger.warning(
                "Slow request",
                method=request.method,
                path=request.url.path,
                elapsed_ms=elapsed_ms,
            )
        return response
