"""
Request and response models for the log proxy endpoints.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from log_proxy.domain.entities.log_level import Level


class LogRequest(BaseModel):
    """Inbound log payload. Validation of ``message`` happens in the service."""
    model_config = ConfigDict(extra="ignore")

    message: Any = Field(None, description="Plain text or a JSON object/array")
    level: Any = Field(Level.INFO.value, description="INFO, WARN, ERROR or DEBUG (case-insensitive)")


class LogAcknowledgement(BaseModel):
    status: str = "success"
    message: str = "Log received and printed to console"
    timestamp: str = Field(..., description="Render time, YYYY-MM-DD HH:MM:SS")
    level: Level


class ValidationErrorResponse(BaseModel):
    error: str
    usage: str


class InternalErrorResponse(BaseModel):
    error: str = "Internal server error"
    details: str


class PayloadTooLargeResponse(BaseModel):
    error: str = "Payload too large"
    limit: int = Field(..., description="Maximum accepted body size in bytes")


class MethodNotAllowedResponse(BaseModel):
    error: str = "Method not allowed"
    allowedMethods: List[str] = ["GET", "POST"]
    usage: str = 'POST with JSON body containing "message" field'


class ServerStatus(BaseModel):
    status: str
    port: int
    usage: str
    example: Dict[str, Any]
