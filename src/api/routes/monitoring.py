# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Monitoring API routes exercising each Azure Monitor sink operation.
"""

import asyncio
import time
from datetime import datetime, timedelta, timezone
from typing import Any, Optional
from fastapi import APIRouter, HTTPException
from src.api.routes.sinks import get_azure_monitor_logger
from src.core.models.events import CamelModel
from src.core.models.monitoring import (
    AzureMonitorEventRequest,
    LogErrorRequest,
    LogMessageRequest,
    MessageResponse,
    SimulateOperationRequest,
    TrackDependencyRequest,
    TrackEventRequest,
    TrackMetricRequest,
)
from src.core.observability import OperationScope

router = APIRouter(prefix="/monitoring", tags=["monitoring"])

DEFAULT_OPERATION_NAME = "TestOperation"


class SimulatedOperationResponse(CamelModel):
    message: str
    operation_name: str
    duration_ms: float


def _require(value: Optional[str], field_name: str) -> str:
    """Return value or reject the request when it is blank.

    :raises HTTPException: If value is blank (400 error).
    """
    if not value or not value.strip():
        raise HTTPException(status_code=400, detail=f"{field_name} is required")
    return value


@router.post("/log-info", response_model=MessageResponse)
async def log_information(request: LogMessageRequest) -> MessageResponse:
    message = _require(request.message, "Message")
    get_azure_monitor_logger().log_information(message)
    return MessageResponse(message="Information logged successfully")


@router.post("/log-warning", response_model=MessageResponse)
async def log_warning(request: LogMessageRequest) -> MessageResponse:
    message = _require(request.message, "Message")
    get_azure_monitor_logger().log_warning(message)
    return MessageResponse(message="Warning logged successfully")


@router.post("/log-error", response_model=MessageResponse)
async def log_error(request: LogErrorRequest) -> MessageResponse:
    """Log an error, wrapping exceptionMessage in an exception when given."""
    message = _require(request.message, "Message")
    exception: Optional[Exception] = None
    if request.exception_message and request.exception_message.strip():
        exception = Exception(request.exception_message)
    get_azure_monitor_logger().log_error(message, exception)
    return MessageResponse(message="Error logged successfully")


@router.post("/track-event", response_model=MessageResponse)
async def track_event(request: TrackEventRequest) -> MessageResponse:
    event_name = _require(request.event_name, "EventName")
    get_azure_monitor_logger().track_event(event_name, request.properties, request.metrics)
    return MessageResponse(message="Event tracked successfully")


@router.post("/track-metric", response_model=MessageResponse)
async def track_metric(request: TrackMetricRequest) -> MessageResponse:
    metric_name = _require(request.metric_name, "MetricName")
    get_azure_monitor_logger().track_metric(metric_name, request.value, request.properties)
    return MessageResponse(message="Metric tracked successfully")


@router.post("/track-dependency", response_model=MessageResponse)
async def track_dependency(request: TrackDependencyRequest) -> MessageResponse:
    """Track a dependency call that ended now and lasted durationSeconds."""
    dependency_type_name = _require(request.dependency_type_name, "DependencyTypeName")
    dependency_name = _require(request.dependency_name, "DependencyName")
    duration = timedelta(seconds=request.duration_seconds)
    get_azure_monitor_logger().track_dependency(
        dependency_type_name,
        dependency_name,
        request.data or "",
        datetime.now(timezone.utc) - duration,
        duration,
        request.success,
    )
    return MessageResponse(message="Dependency tracked successfully")


@router.post("/custom-event", response_model=MessageResponse)
async def log_custom_event(request: AzureMonitorEventRequest) -> MessageResponse:
    event_name = _require(request.event_name, "EventName")
    attributes: tuple[Any, ...] = ()
    if request.additional_attribute and request.additional_attribute.strip():
        attributes = (request.additional_attribute,)
    get_azure_monitor_logger().log_custom_event(event_name, *attributes)
    return MessageResponse(message="Custom event logged successfully")


@router.post("/simulate-operation", response_model=SimulatedOperationResponse)
async def simulate_operation(
    request: Optional[SimulateOperationRequest] = None,
) -> SimulatedOperationResponse:
    """Simulate an operation that emits an event, a dependency and a metric.

    :param request: Optional operation name.
    :type request: Optional[SimulateOperationRequest]
    :returns: Operation summary with elapsed time.
    :rtype: SimulatedOperationResponse
    """
    operation_name = (request and request.operation_name) or DEFAULT_OPERATION_NAME
    sink = get_azure_monitor_logger()
    start = time.perf_counter()

    with OperationScope(operation_name):
        sink.log_information(f"Starting operation: {operation_name}")
        try:
            await asyncio.sleep(0.1)
            sink.track_event(
                f"{operation_name}Started",
                {"Operation": operation_name},
                {"DurationMs": 100},
            )

            dependency_start = datetime.now(timezone.utc)
            await asyncio.sleep(0.05)
            sink.track_dependency(
                "HTTP",
                "ExternalAPI",
                "GET /api/data",
                dependency_start,
                timedelta(milliseconds=50),
                True,
            )
            sink.track_metric(
                f"{operation_name}.ExecutionTime",
                150,
                {"Status": "Success"},
            )
            sink.log_information(f"Operation completed successfully: {operation_name}")
        except Exception as e:
            sink.log_error(f"Operation failed: {operation_name}", e)
            raise

    return SimulatedOperationResponse(
        message="Operation simulated and monitored successfully",
        operation_name=operation_name,
        duration_ms=round((time.perf_counter() - start) * 1000, 2),
    )
