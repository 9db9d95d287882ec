# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Application Insights telemetry sink.

Traces and custom events are written as log records. The Azure Monitor
distro's logging handler exports records to the traces table, and records
carrying ``microsoft.custom_event.name`` to the customEvents table, with the
remaining record attributes as custom dimensions.
"""

import logging
from datetime import datetime, timedelta
from typing import Any, Dict, Mapping, Optional

from opentelemetry import metrics as otel_metrics, trace
from opentelemetry.metrics import Meter
from opentelemetry.trace import Tracer

from src.core.observability import StructuredLogger, get_logger
from src.core.telemetry.instruments import HistogramCache, record_dependency

INSTRUMENTATION_NAME = "SimpleLog.AppInsights"
CUSTOM_EVENT_NAME_ATTRIBUTE = "microsoft.custom_event.name"


class AppInsightsLogger:
    """
    TelemetrySink that favours log records over spans.
    """

    def __init__(
        self,
        logger: Optional[StructuredLogger] = None,
        tracer: Optional[Tracer] = None,
        meter: Optional[Meter] = None,
    ) -> None:
        self._logger = logger or get_logger(__name__)
        self._tracer = tracer or trace.get_tracer(INSTRUMENTATION_NAME)
        self._histograms = HistogramCache(meter or otel_metrics.get_meter(INSTRUMENTATION_NAME))

    def log_information(self, message: str, *args: Any) -> None:
        self._logger.info(message, *args)

    def log_warning(self, message: str, *args: Any) -> None:
        self._logger.warning(message, *args)

    def log_error(
        self, message: str, exception: Optional[BaseException] = None, *args: Any
    ) -> None:
        """Log an error; with an exception the record carries its traceback.

        :param message: Error message
        :param exception: Exception to report, if any
        """
        if exception is not None:
            self._logger.error(message, *args, exc_info=exception, extra={"Message": message})
        else:
            self._logger.error(message, *args)

    def log_debug(self, message: str, *args: Any) -> None:
        self._logger.debug(message, *args)

    def log_critical(
        self, message: str, exception: Optional[BaseException] = None, *args: Any
    ) -> None:
        if exception is not None:
            self._logger.critical(
                message,
                *args,
                exc_info=exception,
                extra={"Message": message, "Severity": "Critical"},
            )
        else:
            self._logger.critical(message, *args)

    def track_event(
        self,
        event_name: str,
        properties: Optional[Mapping[str, str]] = None,
        metrics: Optional[Mapping[str, float]] = None,
    ) -> None:
        """Track a custom event as a marked log record.

        Properties and metrics become record attributes (custom dimensions).
        The record is written even when INFO is disabled for the logger.

        :param event_name: Name of the custom event
        :param properties: String properties
        :param metrics: Numeric measurements
        """
        fields: Dict[str, Any] = dict(metrics or {})
        fields.update(properties or {})
        fields[CUSTOM_EVENT_NAME_ATTRIBUTE] = event_name
        self._logger.always(logging.INFO, event_name, extra=fields)

    def track_metric(
        self,
        metric_name: str,
        value: float,
        properties: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._histograms.record(metric_name, value, properties)

    def track_dependency(
        self,
        dependency_type_name: str,
        dependency_name: str,
        data: str,
        start_time: datetime,
        duration: timedelta,
        success: bool,
    ) -> None:
        record_dependency(
            self._tracer,
            dependency_type_name,
            dependency_name,
            data,
            start_time,
            duration,
            success,
        )
