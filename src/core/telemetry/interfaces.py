# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Telemetry sink protocols.

Event helpers and routes depend on these protocols only, so any
implementation (or a mock in tests) can be passed in.
"""

from datetime import datetime, timedelta
from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class TelemetrySink(Protocol):
    """Log lines, custom events, metrics and dependency calls."""

    def log_information(self, message: str, *args: Any) -> None:
        """Log an informational message."""
        ...

    def log_warning(self, message: str, *args: Any) -> None:
        """Log a warning message."""
        ...

    def log_error(
        self, message: str, exception: Optional[BaseException] = None, *args: Any
    ) -> None:
        """Log an error message, optionally with the exception that caused it."""
        ...

    def log_debug(self, message: str, *args: Any) -> None:
        """Log a debug message."""
        ...

    def log_critical(
        self, message: str, exception: Optional[BaseException] = None, *args: Any
    ) -> None:
        """Log a critical message, optionally with the exception that caused it."""
        ...

    def track_event(
        self,
        event_name: str,
        properties: Optional[Mapping[str, str]] = None,
        metrics: Optional[Mapping[str, float]] = None,
    ) -> None:
        """Track a custom event with optional properties and metrics."""
        ...

    def track_metric(
        self,
        metric_name: str,
        value: float,
        properties: Optional[Mapping[str, str]] = None,
    ) -> None:
        """Track a custom metric value."""
        ...

    def track_dependency(
        self,
        dependency_type_name: str,
        dependency_name: str,
        data: str,
        start_time: datetime,
        duration: timedelta,
        success: bool,
    ) -> None:
        """Track a call to an external dependency (API, database, ...)."""
        ...


@runtime_checkable
class CustomEventSink(Protocol):
    """Custom events attached to the current trace."""

    def log_custom_event(
        self,
        event_name: str,
        *attributes: Any,
        level: Optional[int] = None,
        exception: Optional[BaseException] = None,
    ) -> None:
        """Log a custom event with positional attributes."""
        ...


@runtime_checkable
class AzureMonitorSink(TelemetrySink, Protocol):
    """Telemetry sink that can also emit OpenTelemetry custom events."""

    def log_custom_event(self, event_name: str, *attributes: Any) -> None:
        """Log a custom event on the current span."""
        ...
