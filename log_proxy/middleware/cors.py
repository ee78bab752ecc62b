"""
Permissive CORS middleware.

Browsers posting logs from any origin must be able to reach the proxy, so
every response carries wildcard CORS headers and every OPTIONS request is
answered directly with a bare 200.
"""

from typing import Callable, Dict

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

CORS_HEADERS: Dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Origin, X-Requested-With, Content-Type, Accept, Authorization",
}


class CorsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.method == "OPTIONS":
            response = Response(content="OK", status_code=200, media_type="text/plain")
        else:
            response = await call_next(request)

        response.headers.update(CORS_HEADERS)
        return response
