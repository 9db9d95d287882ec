# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Error handlers for the SimpleLog API.

Request validation failures are reported as 400 with a ``detail`` message,
the same shape as the HTTPException errors raised by the routes.
"""

from typing import Any, Dict, Sequence
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from src.core.observability import LogLevel, create_service_event, get_logger

BODY_REQUIRED_MESSAGE = "Request body is required."
INVALID_REQUEST_MESSAGE = "Invalid request"

logger = get_logger(__name__)


def validation_error_detail(errors: Sequence[Dict[str, Any]]) -> str:
    """Summarize FastAPI validation errors as one message.

    A missing body yields BODY_REQUIRED_MESSAGE. Otherwise the first error is
    reported with its field, e.g. ``Invalid request: durationSeconds:
    Input should be greater than or equal to 0``.

    :param errors: RequestValidationError.errors()
    :returns: Message for the response detail
    """
    if not errors:
        return INVALID_REQUEST_MESSAGE
    first = errors[0]
    location = [str(part) for part in first.get("loc", ())]
    if location == ["body"] and first.get("type") == "missing":
        return BODY_REQUIRED_MESSAGE
    message = first.get("msg", "")
    if first.get("type") == "json_invalid":
        return f"{INVALID_REQUEST_MESSAGE}: {message}"
    field = ".".join(location[1:] if location[:1] == ["body"] else location)
    if not field:
        return f"{INVALID_REQUEST_MESSAGE}: {message}"
    return f"{INVALID_REQUEST_MESSAGE}: {field}: {message}"


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    detail = validation_error_detail(exc.errors())
    logger.event(
        create_service_event(
            event="validation_failed",
            level=LogLevel.WARN,
            http_method=request.method,
            http_path=request.url.path,
            error=detail,
        )
    )
    return JSONResponse(status_code=400, content={"detail": detail})


def register_error_handlers(app: FastAPI) -> None:
    """Register the API error handlers with app."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
