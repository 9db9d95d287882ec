# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
OpenTelemetry helpers shared by the telemetry sinks.
"""

import re
import threading
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Mapping, Optional

from opentelemetry.metrics import Histogram, Meter
from opentelemetry.trace import SpanKind, Status, StatusCode, Tracer

AttributeValue = Any

MAX_INSTRUMENT_NAME_LENGTH = 255
_INVALID_INSTRUMENT_CHARS = re.compile(r"[^A-Za-z0-9_.\-/]")


def to_attribute(value: Any) -> AttributeValue:
    """Coerce a value into something OpenTelemetry accepts as an attribute."""
    if isinstance(value, (str, bool, int, float)):
        return value
    return str(value)


def instrument_name(name: str) -> str:
    """Turn a metric name into a valid OpenTelemetry instrument name.

    Disallowed characters become underscores and a name not starting with a
    letter gets an ``m_`` prefix. The result is cut to 255 characters.
    ``"Checkout Latency"`` becomes ``"Checkout_Latency"``.

    :param name: Metric name as given by the caller
    :returns: Instrument name the SDK accepts
    """
    normalized = _INVALID_INSTRUMENT_CHARS.sub("_", name)
    if not normalized[:1].isalpha():
        normalized = f"m_{normalized}"
    return normalized[:MAX_INSTRUMENT_NAME_LENGTH]


def to_epoch_ns(moment: datetime) -> int:
    """Convert a datetime to nanoseconds since the epoch (naive means UTC)."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return int(moment.timestamp() * 1_000_000_000)


class HistogramCache:
    """
    One histogram per metric name, created on first use.

    Names are passed through instrument_name before reaching the meter.
    """

    def __init__(self, meter: Meter) -> None:
        self._meter = meter
        self._histograms: Dict[str, Histogram] = {}
        self._lock = threading.Lock()

    def get(self, name: str) -> Histogram:
        histogram = self._histograms.get(name)
        if histogram is None:
            with self._lock:
                histogram = self._histograms.get(name)
                if histogram is None:
                    histogram = self._meter.create_histogram(instrument_name(name))
                    self._histograms[name] = histogram
        return histogram

    def record(
        self, name: str, value: float, properties: Optional[Mapping[str, str]] = None
    ) -> None:
        attributes = dict(properties) if properties else None
        self.get(name).record(value, attributes=attributes)

    def __len__(self) -> int:
        return len(self._histograms)


def record_dependency(
    tracer: Tracer,
    dependency_type_name: str,
    dependency_name: str,
    data: str,
    start_time: datetime,
    duration: timedelta,
    success: bool,
) -> None:
    """Emit a CLIENT span covering an already finished dependency call.

    :param tracer: Tracer creating the span
    :param dependency_type_name: Dependency kind, e.g. HTTP or SQL
    :param dependency_name: Span name
    :param data: Command or URL of the call
    :param start_time: When the call started
    :param duration: How long it took
    :param success: False marks the span as an error
    """
    start_ns = to_epoch_ns(start_time)
    span = tracer.start_span(
        dependency_name,
        kind=SpanKind.CLIENT,
        attributes={
            "dependency.type": dependency_type_name,
            "dependency.name": dependency_name,
            "dependency.data": data,
            "dependency.success": success,
        },
        start_time=start_ns,
    )
    if not success:
        span.set_status(Status(StatusCode.ERROR))
    span.end(end_time=start_ns + int(duration.total_seconds() * 1_000_000_000))
