# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Telemetry sinks for Azure Monitor / Application Insights.

- AppInsightsLogger: log-record based traces and custom events
- AzureMonitorLogger: span based events and dependencies
- CustomEventLogger: custom events on the active span
"""

from src.core.telemetry.interfaces import AzureMonitorSink, CustomEventSink, TelemetrySink
from src.core.telemetry.app_insights import AppInsightsLogger
from src.core.telemetry.azure_monitor import AzureMonitorLogger
from src.core.telemetry.custom_events import CustomEventLogger, parse_log_level
from src.core.telemetry.configure import configure_telemetry, resolve_connection_string

__all__ = [
    "TelemetrySink",
    "AzureMonitorSink",
    "CustomEventSink",
    "AppInsightsLogger",
    "AzureMonitorLogger",
    "CustomEventLogger",
    "parse_log_level",
    "configure_telemetry",
    "resolve_connection_string",
]
