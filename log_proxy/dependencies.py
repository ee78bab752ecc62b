from __future__ import annotations
from typing import Any, Dict
import logging

from fastapi import Request
from starlette.types import Message

from log_proxy.config import Settings
from log_proxy.domain.exceptions import PayloadTooLargeError
from log_proxy.domain.services.log_service import LogService
from log_proxy.utils.json_parsing import loads_strict

logger = logging.getLogger(__name__)

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_log_service(request: Request) -> LogService:
    return request.app.state.log_service


def _media_type(content_type: str) -> str:
    return content_type.split(";", 1)[0].strip().lower()


async def read_body(request: Request, limit: int) -> bytes:
    """
    Read the request body, stopping as soon as it grows past ``limit`` bytes.

    Raises:
        PayloadTooLargeError: If the body is larger than ``limit``
    """
    chunks = []
    size = 0
    async for chunk in request.stream():
        size += len(chunk)
        if size > limit:
            raise PayloadTooLargeError(limit)
        chunks.append(chunk)
    return b"".join(chunks)


async def _parse_form(request: Request, body: bytes) -> Dict[str, Any]:
    # The original stream is spent, so the form parser reads the buffered body
    async def receive() -> Message:
        return {"type": "http.request", "body": body, "more_body": False}

    form = await Request(request.scope, receive).form()
    return {key: value for key, value in form.items() if isinstance(value, str)}


async def read_log_payload(request: Request) -> Dict[str, Any]:
    """
    Decode the request body into a field mapping.

    JSON and form bodies are decoded; anything else, an empty body, or a JSON
    document that is not an object yields an empty mapping. Malformed JSON,
    including the non-standard NaN and Infinity literals, raises ``ValueError``
    for the error handling middleware.

    Raises:
        PayloadTooLargeError: If the body is larger than MAX_BODY_SIZE
    """
    body = await read_body(request, get_settings(request).MAX_BODY_SIZE)
    media_type = _media_type(request.headers.get("content-type", ""))

    if media_type == "application/json" or media_type.endswith("+json"):
        if not body.strip():
            return {}
        payload = loads_strict(body)
        if not isinstance(payload, dict):
            logger.info(f"ℹ️ Ignoring non-object JSON body ({type(payload).__name__})")
            return {}
        return payload

    if media_type in _FORM_TYPES:
        return await _parse_form(request, body)

    return {}
