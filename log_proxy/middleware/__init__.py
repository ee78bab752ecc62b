"""
Middleware package for the log proxy.

This package contains middleware components for handling cross-cutting concerns
such as CORS, request logging, error handling and request size limits.
"""

from .cors import CorsMiddleware
from .error_handling import ErrorHandlingMiddleware
from .logging import LoggingMiddleware
from .request_validation import RequestValidationMiddleware

__all__ = [
    "CorsMiddleware",
    "ErrorHandlingMiddleware",
    "LoggingMiddleware",
    "RequestValidationMiddleware",
]
