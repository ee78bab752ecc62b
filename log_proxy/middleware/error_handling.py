"""
Error handling middleware for the log proxy.

Catches anything that escapes the routes (malformed JSON bodies included),
prints it to the console at ERROR level so the operator sees it, and answers
with the standard internal error body.
"""

import logging
import traceback
from typing import Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from log_proxy.domain.entities.log_level import Level
from log_proxy.schemas.logs import InternalErrorResponse

logger = logging.getLogger(__name__)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for centralized handling of unexpected exceptions.
    """

    def __init__(self, app, enable_error_logging: bool = True):
        """
        Initialize the error handling middleware.

        Args:
            app: FastAPI application instance
            enable_error_logging: Whether to log full tracebacks
        """
        super().__init__(app)
        self.enable_error_logging = enable_error_logging

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            return self._handle_unexpected_exception(request, e)

    def _handle_unexpected_exception(self, request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            f"💥 Unexpected error for {request.method} {request.url.path}: {str(exc)}"
        )
        if self.enable_error_logging:
            logger.error(f"📋 Full traceback:\n{traceback.format_exc()}")

        log_service = getattr(request.app.state, "log_service", None)
        if log_service is not None:
            try:
                log_service.emit(f"Server Error: {exc}", Level.ERROR)
            except Exception as console_error:
                logger.error(f"💥 Could not print error to console: {console_error}")

        error = InternalErrorResponse(details=str(exc))
        return JSONResponse(status_code=500, content=error.model_dump())
