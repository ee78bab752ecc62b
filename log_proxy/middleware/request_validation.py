"""
Request validation middleware for the log proxy.

Refuses bodies whose declared Content-Length is above the configured limit
before they are read. Bodies without a usable Content-Length are measured
after reading by the ingest route.
"""

import logging
from typing import Callable, Optional

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from log_proxy.config import DEFAULT_MAX_BODY_SIZE
from log_proxy.schemas.logs import PayloadTooLargeResponse

logger = logging.getLogger(__name__)


class RequestValidationMiddleware(BaseHTTPMiddleware):
    """Rejects oversized requests with 413."""

    def __init__(self, app, max_request_size: int = DEFAULT_MAX_BODY_SIZE):
        """
        Initialize the request validation middleware.

        Args:
            app: FastAPI application instance
            max_request_size: Maximum request size in bytes (50MB default)
        """
        super().__init__(app)
        self.max_request_size = max_request_size

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        size = self._declared_size(request)
        if size is not None and size > self.max_request_size:
            logger.warning(
                f"⚠️ Rejected {request.method} {request.url.path}: "
                f"{size} bytes exceeds {self.max_request_size}"
            )
            error = PayloadTooLargeResponse(limit=self.max_request_size)
            return JSONResponse(status_code=413, content=error.model_dump())

        return await call_next(request)

    @staticmethod
    def _declared_size(request: Request) -> Optional[int]:
        content_length = request.headers.get("content-length")
        if not content_length:
            return None
        try:
            return int(content_length)
        except ValueError:
            return None
