# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""SimpleLog - telemetry facade for Azure Monitor / Application Insights.

This package provides:
- Login and workflow event enrichment helpers
- Telemetry sinks (Application Insights, Azure Monitor OpenTelemetry)
- Structured logging and request observability
- Request/response models for the HTTP API
"""

from src.core.events import TrackResult, ValidationError, try_track_login, try_track_workflow_action
from src.core.telemetry import (
    AppInsightsLogger,
    AzureMonitorLogger,
    CustomEventLogger,
    TelemetrySink,
)

__all__ = [
    "TrackResult",
    "ValidationError",
    "try_track_login",
    "try_track_workflow_action",
    "AppInsightsLogger",
    "AzureMonitorLogger",
    "CustomEventLogger",
    "TelemetrySink",
]
