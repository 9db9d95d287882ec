# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Monitoring and custom event request models."""

from typing import Optional
from pydantic import BaseModel, Field
from src.core.models.events import CamelModel


class LogMessageRequest(CamelModel):
    message: Optional[str] = ""


class LogErrorRequest(CamelModel):
    message: Optional[str] = ""
    exception_message: Optional[str] = None


class TrackEventRequest(CamelModel):
    event_name: Optional[str] = ""
    properties: Optional[dict[str, str]] = None
    metrics: Optional[dict[str, float]] = None


class TrackMetricRequest(CamelModel):
    metric_name: Optional[str] = ""
    value: float = 0.0
    properties: Optional[dict[str, str]] = None


class TrackDependencyRequest(CamelModel):
    """Dependency call that finished DurationSeconds ago."""

    dependency_type_name: Optional[str] = ""
    dependency_name: Optional[str] = ""
    data: Optional[str] = None
    duration_seconds: float = Field(default=1.0, ge=0)
    success: bool = True


class AzureMonitorEventRequest(CamelModel):
    event_name: Optional[str] = ""
    additional_attribute: Optional[str] = None


class SimulateOperationRequest(CamelModel):
    operation_name: Optional[str] = None


class CustomEventRequest(CamelModel):
    event_name: Optional[str] = None
    user_id: Optional[str] = None
    ip_address: Optional[str] = None


class CustomEventWithLevelRequest(CamelModel):
    event_name: Optional[str] = None
    log_level: Optional[str] = None
    details: Optional[str] = None


class CustomEventWithExceptionRequest(CamelModel):
    event_name: Optional[str] = None
    exception_message: Optional[str] = None
    details: Optional[str] = None


class MessageResponse(BaseModel):
    """Acknowledgement returned by the monitoring endpoints."""

    message: str
