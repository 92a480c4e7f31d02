"""JSON error envelopes shared by the HTTP routes."""

from __future__ import annotations

from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

INTERNAL_ERROR_MESSAGE = "Internal server error"


def error_response(message: str, status_code: int, details: Any = None) -> JSONResponse:
    content: dict[str, Any] = {"error": message}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


def validation_error_response(message: str, exc: ValidationError) -> JSONResponse:
    """Return HTTP 400 listing the failing fields of ``exc``."""

    details = [
        {"loc": [str(part) for part in error["loc"]], "msg": error["msg"]}
        for error in exc.errors()
    ]
    return error_response(message, status.HTTP_400_BAD_REQUEST, details)


def internal_error_response() -> JSONResponse:
    return error_response(INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)
