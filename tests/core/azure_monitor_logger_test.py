# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Tests for AzureMonitorLogger."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable
import pytest
from pytest_mock import MockerFixture
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import SpanKind, StatusCode, Tracer
from src.core.telemetry import AzureMonitorLogger, TelemetrySink


class TestAzureMonitorLogger:
    """
    Tests for the OpenTelemetry backed sink.
    """

    @pytest.fixture
    def sink(self, tracer: Tracer, meter: Any, mocker: MockerFixture) -> AzureMonitorLogger:
        return AzureMonitorLogger(
            tracer=tracer,
            meter=meter,
            custom_event_logger=mocker.MagicMock(),
        )

    def test_satisfies_protocol(self, sink: AzureMonitorLogger) -> None:
        assert isinstance(sink, TelemetrySink)

    def test_track_event_creates_span(
        self, sink: AzureMonitorLogger, span_exporter: InMemorySpanExporter
    ) -> None:
        """
        Properties become attributes and metrics become metric.* attributes.
        """
        sink.track_event("UserLogin", {"userId": "u1"}, {"DurationMs": 100.0})

        spans = span_exporter.get_finished_spans()
        assert len(spans) == 1
        span = spans[0]
        assert span.name == "UserLogin"
        assert span.kind == SpanKind.INTERNAL
        assert span.attributes["userId"] == "u1"
        assert span.attributes["metric.DurationMs"] == 100.0
        assert [event.name for event in span.events] == ["UserLogin"]

    def test_track_event_without_properties(
        self, sink: AzureMonitorLogger, span_exporter: InMemorySpanExporter
    ) -> None:
        sink.track_event("Ping")
        assert span_exporter.get_finished_spans()[0].name == "Ping"

    def test_track_dependency_success(
        self, sink: AzureMonitorLogger, span_exporter: InMemorySpanExporter
    ) -> None:
        """
        Dependency spans are CLIENT spans with explicit start and end times.
        """
        start = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        sink.track_dependency(
            "HTTP", "ExternalAPI", "GET /api/data", start, timedelta(milliseconds=50), True
        )

        span = span_exporter.get_finished_spans()[0]
        assert span.name == "ExternalAPI"
        assert span.kind == SpanKind.CLIENT
        assert span.attributes["dependency.type"] == "HTTP"
        assert span.attributes["dependency.data"] == "GET /api/data"
        assert span.attributes["dependency.success"] is True
        assert span.end_time - span.start_time == 50_000_000
        assert span.start_time == int(start.timestamp() * 1_000_000_000)
        assert span.status.status_code != StatusCode.ERROR

    def test_track_dependency_failure_sets_error(
        self, sink: AzureMonitorLogger, span_exporter: InMemorySpanExporter
    ) -> None:
        sink.track_dependency(
            "SQL", "orders-db", "SELECT 1", datetime.now(timezone.utc), timedelta(seconds=1), False
        )
        span = span_exporter.get_finished_spans()[0]
        assert span.status.status_code == StatusCode.ERROR

    def test_track_metric_records_histogram(
        self, sink: AzureMonitorLogger, histogram_points: Callable[[str], list]
    ) -> None:
        """
        Values for the same metric name land in one histogram.
        """
        sink.track_metric("ServiceUptime", 10.0)
        sink.track_metric("ServiceUptime", 20.0, {"Status": "Success"})

        points = histogram_points("ServiceUptime")
        assert sum(point.count for point in points) == 2
        assert sum(point.sum for point in points) == 30.0
        assert len(sink._histograms) == 1

    def test_track_metric_with_spaces_in_name(
        self, sink: AzureMonitorLogger, histogram_points: Callable[[str], list]
    ) -> None:
        sink.track_metric("Checkout Latency", 12.5)
        sink.track_metric("My Op.ExecutionTime", 150)

        assert sum(point.sum for point in histogram_points("Checkout_Latency")) == 12.5
        assert sum(point.sum for point in histogram_points("My_Op.ExecutionTime")) == 150

    def test_log_adds_span_event_when_recording(
        self,
        sink: AzureMonitorLogger,
        tracer: Tracer,
        span_exporter: InMemorySpanExporter,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """
        Log lines are mirrored as ``log`` events on the current span.
        """
        with caplog.at_level(logging.DEBUG):
            with tracer.start_as_current_span("request"):
                sink.log_information("hello %s", "world")
                sink.log_error("boom", ValueError("bad value"))

        span = span_exporter.get_finished_spans()[0]
        events = [event for event in span.events if event.name == "log"]
        assert events[0].attributes["log.level"] == "Information"
        assert events[0].attributes["log.message"] == "hello %s"
        assert events[1].attributes["log.level"] == "Error"
        assert events[1].attributes["exception.type"] == "ValueError"
        assert events[1].attributes["exception.message"] == "bad value"
        assert "hello world" in caplog.text

    def test_log_without_span(
        self, sink: AzureMonitorLogger, caplog: pytest.LogCaptureFixture
    ) -> None:
        """
        Without an active span only the log record is written.
        """
        with caplog.at_level(logging.DEBUG):
            sink.log_warning("careful")
            sink.log_debug("details")
            sink.log_critical("down", RuntimeError("fatal"))

        levels = [record.levelno for record in caplog.records]
        assert levels == [logging.WARNING, logging.DEBUG, logging.CRITICAL]
        assert caplog.records[-1].exc_info is not None

    def test_log_custom_event_delegates(self, sink: AzureMonitorLogger) -> None:
        sink.log_custom_event("user-action", "extra")
        sink._custom_events.log_custom_event.assert_called_once_with("user-action", "extra")
