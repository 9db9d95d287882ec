# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Custom event API routes
"""

from typing import Optional
from fastapi import APIRouter, HTTPException
from src.api.routes.sinks import get_custom_event_logger
from src.core.models.monitoring import (
    CustomEventRequest,
    CustomEventWithExceptionRequest,
    CustomEventWithLevelRequest,
    MessageResponse,
)
from src.core.telemetry import parse_log_level

router = APIRouter(prefix="/custom-events", tags=["custom-events"])

EVENT_NAME_REQUIRED = "EventName is required"
INVALID_LOG_LEVEL = (
    "Invalid LogLevel. Allowed values: Trace, Debug, Information, Warning, Error, Critical, None"
)


def _require_event_name(event_name: Optional[str]) -> str:
    if not event_name or not event_name.strip():
        raise HTTPException(status_code=400, detail=EVENT_NAME_REQUIRED)
    return event_name


@router.post("/simple", response_model=MessageResponse)
async def log_simple_event() -> MessageResponse:
    """Log the fixed user-action event."""
    get_custom_event_logger().log_custom_event("user-action")
    return MessageResponse(message="Custom event logged successfully")


@router.post("/with-attributes", response_model=MessageResponse)
async def log_event_with_attributes(request: CustomEventRequest) -> MessageResponse:
    """Log a custom event with userId and ipAddress as attributes."""
    event_name = _require_event_name(request.event_name)
    get_custom_event_logger().log_custom_event(event_name, request.user_id, request.ip_address)
    return MessageResponse(message="Custom event with attributes logged successfully")


@router.post("/with-level", response_model=MessageResponse)
async def log_event_with_level(request: CustomEventWithLevelRequest) -> MessageResponse:
    """Log a custom event at the requested level.

    :raises HTTPException: If the level name is not recognised (400 error).
    """
    event_name = _require_event_name(request.event_name)
    level = parse_log_level(request.log_level)
    if level is None:
        raise HTTPException(status_code=400, detail=INVALID_LOG_LEVEL)
    get_custom_event_logger().log_custom_event(event_name, request.details, level=level)
    return MessageResponse(message="Custom event with log level logged successfully")


@router.post("/with-exception", response_model=MessageResponse)
async def log_event_with_exception(request: CustomEventWithExceptionRequest) -> MessageResponse:
    """Log a custom event carrying an exception built from exceptionMessage."""
    event_name = _require_event_name(request.event_name)
    exception = Exception(request.exception_message or "An error occurred")
    get_custom_event_logger().log_custom_event(event_name, request.details, exception=exception)
    return MessageResponse(message="Custom event with exception logged successfully")
