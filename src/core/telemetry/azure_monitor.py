# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Azure Monitor OpenTelemetry telemetry sink.

Log lines go through the standard logging pipeline and are mirrored as
``log`` events on the active span. Events and dependencies are spans;
metrics are histograms. With ``configure_azure_monitor`` in place all of it
is exported to Application Insights.
"""

from datetime import datetime, timedelta
from typing import Any, Mapping, Optional

from opentelemetry import metrics as otel_metrics, trace
from opentelemetry.metrics import Meter
from opentelemetry.trace import SpanKind, Tracer

from src.core.observability import StructuredLogger, get_logger
from src.core.telemetry.custom_events import CustomEventLogger
from src.core.telemetry.instruments import HistogramCache, record_dependency, to_attribute

INSTRUMENTATION_NAME = "SimpleLog.AzureMonitor"


class AzureMonitorLogger:
    """
    TelemetrySink backed by the OpenTelemetry API.
    """

    def __init__(
        self,
        logger: Optional[StructuredLogger] = None,
        tracer: Optional[Tracer] = None,
        meter: Optional[Meter] = None,
        custom_event_logger: Optional[CustomEventLogger] = None,
    ) -> None:
        """Initialize the sink.

        :param logger: Logger for log lines (defaults to this module's logger)
        :param tracer: Tracer for events and dependencies (defaults to global provider)
        :param meter: Meter for metrics (defaults to global provider)
        :param custom_event_logger: Target of log_custom_event
        """
        self._logger = logger or get_logger(__name__)
        self._tracer = tracer or trace.get_tracer(INSTRUMENTATION_NAME)
        self._histograms = HistogramCache(meter or otel_metrics.get_meter(INSTRUMENTATION_NAME))
        self._custom_events = custom_event_logger or CustomEventLogger(self._logger)

    def log_information(self, message: str, *args: Any) -> None:
        self._logger.info(message, *args)
        self._add_log_event("Information", message, None)

    def log_warning(self, message: str, *args: Any) -> None:
        self._logger.warning(message, *args)
        self._add_log_event("Warning", message, None)

    def log_error(
        self, message: str, exception: Optional[BaseException] = None, *args: Any
    ) -> None:
        self._logger.error(message, *args, exc_info=exception)
        self._add_log_event("Error", message, exception)

    def log_debug(self, message: str, *args: Any) -> None:
        self._logger.debug(message, *args)
        self._add_log_event("Debug", message, None)

    def log_critical(
        self, message: str, exception: Optional[BaseException] = None, *args: Any
    ) -> None:
        self._logger.critical(message, *args, exc_info=exception)
        self._add_log_event("Critical", message, exception)

    def track_event(
        self,
        event_name: str,
        properties: Optional[Mapping[str, str]] = None,
        metrics: Optional[Mapping[str, float]] = None,
    ) -> None:
        """Track a custom event as an INTERNAL span with properties as attributes.

        :param event_name: Span and event name
        :param properties: String properties, set as span attributes
        :param metrics: Numeric measurements, set as ``metric.<name>`` attributes
        """
        with self._tracer.start_as_current_span(event_name, kind=SpanKind.INTERNAL) as span:
            if not span.is_recording():
                return
            for key, value in (properties or {}).items():
                span.set_attribute(key, to_attribute(value))
            for key, value in (metrics or {}).items():
                span.set_attribute(f"metric.{key}", value)
            span.add_event(event_name)

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

    def log_custom_event(self, event_name: str, *attributes: Any) -> None:
        """Log a custom event on the current span. See CustomEventLogger."""
        self._custom_events.log_custom_event(event_name, *attributes)

    @staticmethod
    def _add_log_event(
        level: str, message: str, exception: Optional[BaseException]
    ) -> None:
        span = trace.get_current_span()
        if not span.is_recording():
            return
        attributes = {"log.level": level, "log.message": message}
        if exception is not None:
            attributes["exception.type"] = type(exception).__qualname__
            attributes["exception.message"] = str(exception)
        span.add_event("log", attributes=attributes)
