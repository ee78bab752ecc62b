"""
Request logging middleware for the log proxy.

Writes one diagnostics line per request to the process logger, with what the
ingest route printed (level and structured/plain) when it printed something.
Proxied messages themselves go to the console through the log service.
"""

import logging
import time
from typing import Callable

from fastapi import Request, Response
from starlette.datastructures import State
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


def describe_printed(state: State) -> str:
    """Summarize what the ingest route printed for this request, if anything."""
    level = getattr(state, "printed_level", None)
    if level is None:
        return "nothing printed"
    shape = "structured" if getattr(state, "printed_structured", False) else "plain"
    return f"printed {shape} {level}"


class LoggingMiddleware(BaseHTTPMiddleware):
    """Times each request and adds an ``X-Process-Time`` header."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Bound before the route runs so both sides share one state mapping
        state = request.state
        start_time = time.perf_counter()

        response = await call_next(request)

        process_time = time.perf_counter() - start_time
        client_ip = request.client.host if request.client else None
        logger.info(
            f"📨 {request.method} {request.url.path} from {client_ip} - "
            f"{response.status_code} - {describe_printed(state)} - {process_time:.3f}s"
        )

        response.headers["X-Process-Time"] = f"{process_time:.6f}"
        return response
