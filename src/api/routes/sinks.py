# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Telemetry sinks used by the API routes.

Installed by the application lifespan (or by tests) before requests arrive.
"""

from typing import Optional
from fastapi import HTTPException
from src.core.telemetry import AzureMonitorSink, CustomEventSink, TelemetrySink

SINK_NOT_INITIALIZED = "Telemetry sink not initialized"

_app_insights_logger: Optional[TelemetrySink] = None
_azure_monitor_logger: Optional[AzureMonitorSink] = None
_custom_event_logger: Optional[CustomEventSink] = None


def set_app_insights_logger(sink: Optional[TelemetrySink]) -> None:
    """Set the Application Insights sink.

    :param sink: Sink used by the workflow and weather routes.
    :type sink: Optional[TelemetrySink]
    """
    global _app_insights_logger
    _app_insights_logger = sink


def set_azure_monitor_logger(sink: Optional[AzureMonitorSink]) -> None:
    """Set the Azure Monitor sink.

    :param sink: Sink used by the login, health and monitoring routes.
    :type sink: Optional[AzureMonitorSink]
    """
    global _azure_monitor_logger
    _azure_monitor_logger = sink


def set_custom_event_logger(sink: Optional[CustomEventSink]) -> None:
    """Set the custom event logger.

    :param sink: Logger used by the custom event routes.
    :type sink: Optional[CustomEventSink]
    """
    global _custom_event_logger
    _custom_event_logger = sink


def get_app_insights_logger() -> TelemetrySink:
    """Get the Application Insights sink.

    :raises HTTPException: If not initialized (503 error).
    """
    if _app_insights_logger is None:
        raise HTTPException(status_code=503, detail=SINK_NOT_INITIALIZED)
    return _app_insights_logger


def get_azure_monitor_logger() -> AzureMonitorSink:
    """Get the Azure Monitor sink.

    :raises HTTPException: If not initialized (503 error).
    """
    if _azure_monitor_logger is None:
        raise HTTPException(status_code=503, detail=SINK_NOT_INITIALIZED)
    return _azure_monitor_logger


def get_custom_event_logger() -> CustomEventSink:
    """Get the custom event logger.

    :raises HTTPException: If not initialized (503 error).
    """
    if _custom_event_logger is None:
        raise HTTPException(status_code=503, detail=SINK_NOT_INITIALIZED)
    return _custom_event_logger
