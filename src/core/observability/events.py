# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.
"""
Service events written by the HTTP layer and the telemetry routes.

Each event is a pydantic model; StructuredLogger.event() turns its fields
into record attributes so JSON output and exported custom dimensions share
one schema.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from src.core.observability.context import ObservabilityContextManager

MAX_ERROR_LENGTH = 200


class LogLevel(str, Enum):
    """Severity of a service event."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


ServiceEventType = Literal[
    "request_start",
    "request_end",
    "telemetry_tracked",
    "validation_failed",
    "error",
]
RequestStatus = Literal["success", "failed", "error"]


class ServiceEvent(BaseModel):
    """
    One structured service log line.

    HTTP fields are filled for request events, telemetry fields when a route
    tracks (or refuses to track) a custom event.
    """

    model_config = ConfigDict(use_enum_values=True)

    event: ServiceEventType
    level: LogLevel = LogLevel.INFO
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    correlation_id: Optional[str] = None
    operation_name: Optional[str] = None
    status: Optional[RequestStatus] = None
    duration_ms: Optional[int] = None
    error: Optional[str] = None
    http_method: Optional[str] = None
    http_path: Optional[str] = None
    http_status_code: Optional[int] = None
    client_ip: Optional[str] = None
    user_agent: Optional[str] = None
    telemetry_name: Optional[str] = None
    user_id: Optional[str] = None


def truncate(text: Optional[str], max_length: int = MAX_ERROR_LENGTH) -> Optional[str]:
    """Shorten text to max_length characters, ending in "..." when cut."""
    if text is None or len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


def request_status(status_code: int) -> Tuple[RequestStatus, LogLevel]:
    """Classify an HTTP status code.

    :param status_code: Response status code
    :type status_code: int
    :returns: (status, level): success/INFO below 400, failed/WARN for 4xx,
        error/ERROR otherwise
    :rtype: Tuple[RequestStatus, LogLevel]
    """
    if status_code < 400:
        return "success", LogLevel.INFO
    if status_code < 500:
        return "failed", LogLevel.WARN
    return "error", LogLevel.ERROR


def create_service_event(
    event: ServiceEventType,
    level: LogLevel = LogLevel.INFO,
    **fields: Any,
) -> ServiceEvent:
    """Build a service event stamped with the current observability context.

    Fields passed explicitly win over context values. ``error`` is cut to
    MAX_ERROR_LENGTH characters.

    :param event: Event type
    :type event: ServiceEventType
    :param level: Event severity
    :type level: LogLevel
    :param fields: Other ServiceEvent fields
    :returns: The event
    :rtype: ServiceEvent
    """
    values: dict[str, Any] = dict(ObservabilityContextManager.instance().get_all())
    values.update(fields)
    if "error" in values:
        values["error"] = truncate(values["error"])
    return ServiceEvent(event=event, level=level, **values)
