"""
Routes package for the log proxy.

- ingest: POST / - print a client log message
- health: GET / - server status and usage
- fallback: every other method or path - 405
"""

from .fallback import router as fallback_router
from .health import router as health_router
from .ingest import router as ingest_router

__all__ = ["ingest_router", "health_router", "fallback_router"]
