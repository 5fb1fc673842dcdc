"""Custom middleware components."""

from recipe_engine.core.middleware.logging import LoggingMiddleware
from recipe_engine.core.middleware.request_id import (
    REQUEST_ID_HEADER,
    RequestIDMiddleware,
)
from recipe_engine.core.middleware.timing import PROCESS_TIME_HEADER, TimingMiddleware


__all__ = [
    "PROCESS_TIME_HEADER",
    "REQUEST_ID_HEADER",
    "LoggingMiddleware",
    "RequestIDMiddleware",
    "TimingMiddleware",
]
