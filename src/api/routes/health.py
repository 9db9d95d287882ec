# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Health check endpoints."""

import os
import time
from datetime import datetime, timezone
from typing import Dict
from fastapi import APIRouter
from pydantic import BaseModel
from src.api.routes.sinks import get_azure_monitor_logger

SERVICE_NAME = os.environ.get("SERVICE_NAME", "SimpleLog.Api")
SERVICE_VERSION = "1.0.0"

router = APIRouter(tags=["health"])
_service_status: Dict[str, bool] = {}
_started_at = time.monotonic()


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: str
    version: str
    services: Dict[str, bool] = {}


class ServiceHealth(BaseModel):
    """Service health as reported by /api/health."""

    status: str
    timestamp: datetime
    service: str


class DetailedServiceHealth(ServiceHealth):
    """Service health with runtime details."""

    version: str
    environment: str
    uptime: float


def set_service_status(name: str, running: bool) -> None:
    """Set a service's status for health check.

    :param name: Service name (e.g., "azure_monitor")
    :param running: Whether the service is running
    """
    _service_status[name] = running


def uptime_seconds() -> float:
    """Seconds since the process imported this module."""
    return time.monotonic() - _started_at


@router.get("/healthz", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check API health status.

    :returns: Health status including all service states.
    :rtype: HealthResponse
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=SERVICE_VERSION,
        services=_service_status.copy(),
    )


@router.get("/api/health", response_model=ServiceHealth)
async def service_health() -> ServiceHealth:
    """Report health and track a HealthCheckPerformed event.

    :returns: Basic service health.
    :rtype: ServiceHealth
    """
    sink = get_azure_monitor_logger()
    sink.log_information("Health check endpoint called")
    now = datetime.now(timezone.utc)
    sink.track_event(
        "HealthCheckPerformed",
        {"Status": "Healthy", "Timestamp": now.isoformat()},
    )
    return ServiceHealth(status="Healthy", timestamp=now, service=SERVICE_NAME)


@router.get("/api/health/detailed", response_model=DetailedServiceHealth)
async def detailed_service_health() -> DetailedServiceHealth:
    """Report health details and record the ServiceUptime metric.

    :returns: Service health with version, environment and uptime.
    :rtype: DetailedServiceHealth
    """
    sink = get_azure_monitor_logger()
    sink.log_debug("Detailed health check endpoint called")
    health = DetailedServiceHealth(
        status="Healthy",
        timestamp=datetime.now(timezone.utc),
        service=SERVICE_NAME,
        version=SERVICE_VERSION,
        environment=os.environ.get("ENVIRONMENT", "Production"),
        uptime=uptime_seconds(),
    )
    sink.track_metric("ServiceUptime", health.uptime)
    return health


@router.get("/")
async def root() -> dict:
    """Root endpoint.

    :returns: Service information and documentation link.
    :rtype: dict
    """
    return {
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "docs": "/docs",
    }
