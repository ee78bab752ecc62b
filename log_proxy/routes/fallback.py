from fastapi import APIRouter
from fastapi.responses import JSONResponse

from log_proxy.schemas.logs import MethodNotAllowedResponse

router = APIRouter(tags=["fallback"])

_ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


# Must be mounted after every other router
@router.api_route("/{path:path}", methods=_ALL_METHODS, include_in_schema=False)
async def method_not_allowed():
    return JSONResponse(status_code=405, content=MethodNotAllowedResponse().model_dump())
