"""
Root status endpoint for the log proxy.
"""

from fastapi import APIRouter, Depends

from log_proxy.config import Settings
from log_proxy.dependencies import get_settings
from log_proxy.schemas.logs import ServerStatus

router = APIRouter(tags=["health"])

RUNNING_STATUS = "Log proxy server is running!"


@router.api_route("/", methods=["GET", "HEAD"], response_model=ServerStatus)
async def server_status(settings: Settings = Depends(get_settings)):
    """Static description of the server; query parameters are ignored."""
    return ServerStatus(
        status=RUNNING_STATUS,
        port=settings.PORT,
        usage='POST to this endpoint with JSON body containing "message" field',
        example={
            "method": "POST",
            "url": f"http://localhost:{settings.PORT}",
            "headers": {"Content-Type": "application/json"},
            "body": {"message": "Your log message here"},
        },
    )
