"""
Log ingest endpoint.

Accepts ``{"message": ..., "level": ...}``, prints the rendered message to the
server's terminal and acknowledges it.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from log_proxy.dependencies import get_log_service, read_log_payload
from log_proxy.domain.entities.log_level import Level
from log_proxy.domain.exceptions import MessageRequiredError
from log_proxy.domain.services.log_service import LogService
from log_proxy.schemas.logs import (
    InternalErrorResponse,
    LogAcknowledgement,
    LogRequest,
    ValidationErrorResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["logs"])


@router.post(
    "/",
    response_model=LogAcknowledgement,
    responses={400: {"model": ValidationErrorResponse}, 500: {"model": InternalErrorResponse}},
)
async def ingest_log(
    request: Request,
    payload: Dict[str, Any] = Depends(read_log_payload),
    service: LogService = Depends(get_log_service),
):
    """Print a log message on the server console."""
    try:
        log_request = LogRequest.model_validate(payload)
        rendered = service.ingest(log_request.message, log_request.level)
    except MessageRequiredError as e:
        error = ValidationErrorResponse(error=str(e), usage=e.usage)
        return JSONResponse(status_code=400, content=error.model_dump())
    except Exception as e:
        logger.exception(f"💥 Failed to process log message: {e}")
        service.emit(f"Error processing log message: {e}", Level.ERROR)
        error = InternalErrorResponse(details=str(e))
        return JSONResponse(status_code=500, content=error.model_dump())

    # Read back by the request logging middleware
    request.state.printed_level = rendered.level.value
    request.state.printed_structured = rendered.structured
    return LogAcknowledgement(timestamp=rendered.timestamp, level=rendered.level)
