# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""API routes package."""

from src.api.routes.health import router as health_router
from src.api.routes.login import router as login_router
from src.api.routes.workflow import router as workflow_router
from src.api.routes.monitoring import router as monitoring_router
from src.api.routes.custom_events import router as custom_events_router
from src.api.routes.weather import router as weather_router
from src.api.routes.sinks import (
    set_app_insights_logger,
    set_azure_monitor_logger,
    set_custom_event_logger,
)

__all__ = [
    "health_router",
    "login_router",
    "workflow_router",
    "monitoring_router",
    "custom_events_router",
    "weather_router",
    "set_app_insights_logger",
    "set_azure_monitor_logger",
    "set_custom_event_logger",
]
