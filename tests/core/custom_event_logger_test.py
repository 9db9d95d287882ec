# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Tests for CustomEventLogger and log level parsing."""

import logging
import pytest
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import Tracer
from src.core.telemetry import CustomEventLogger, CustomEventSink, parse_log_level
from src.core.telemetry.custom_events import NO_LOGGING, TRACE


class TestParseLogLevel:
    """Tests for parse_log_level."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("Trace", TRACE),
            ("debug", logging.DEBUG),
            ("INFORMATION", logging.INFO),
            ("Warning", logging.WARNING),
            ("error", logging.ERROR),
            ("Critical", logging.CRITICAL),
            ("None", NO_LOGGING),
        ],
    )
    def test_known_names(self, name: str, expected: int) -> None:
        assert parse_log_level(name) == expected

    @pytest.mark.parametrize("name", [None, "", "verbose", "info"])
    def test_unknown_names(self, name: str) -> None:
        assert parse_log_level(name) is None


class TestCustomEventLogger:
    """Tests for CustomEventLogger."""

    @pytest.fixture
    def event_logger(self) -> CustomEventLogger:
        return CustomEventLogger()

    def test_satisfies_protocol(self, event_logger: CustomEventLogger) -> None:
        assert isinstance(event_logger, CustomEventSink)

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_raises(self, event_logger: CustomEventLogger, name: str) -> None:
        with pytest.raises(ValueError, match="Event name cannot be null or empty."):
            event_logger.log_custom_event(name)

    def test_adds_span_event_with_positional_attributes(
        self,
        event_logger: CustomEventLogger,
        tracer: Tracer,
        span_exporter: InMemorySpanExporter,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """
        Attributes are recorded as attr0..attrN, skipping None values.
        """
        with caplog.at_level(logging.INFO):
            with tracer.start_as_current_span("request"):
                event_logger.log_custom_event("user-login", "admin", None, "192.168.1.1")

        event = span_exporter.get_finished_spans()[0].events[0]
        assert event.name == "user-login"
        assert dict(event.attributes) == {"attr0": "admin", "attr2": "192.168.1.1"}
        assert "Custom event: user-login" in caplog.text

    def test_exception_attributes(
        self,
        event_logger: CustomEventLogger,
        tracer: Tracer,
        span_exporter: InMemorySpanExporter,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.INFO):
            with tracer.start_as_current_span("request"):
                event_logger.log_custom_event(
                    "error-occurred", "details", exception=ConnectionError("db down")
                )

        event = span_exporter.get_finished_spans()[0].events[0]
        assert event.attributes["exception.type"] == "ConnectionError"
        assert event.attributes["exception.message"] == "db down"
        assert event.attributes["attr0"] == "details"
        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert record.exc_info is not None

    def test_level_is_respected(
        self, event_logger: CustomEventLogger, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG):
            event_logger.log_custom_event("critical-action", "x", level=logging.WARNING)

        assert caplog.records[-1].levelno == logging.WARNING

    def test_none_level_skips_log_line(
        self, event_logger: CustomEventLogger, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG):
            event_logger.log_custom_event("quiet", level=NO_LOGGING)

        assert "quiet" not in caplog.text

    def test_no_active_span(
        self, event_logger: CustomEventLogger, caplog: pytest.LogCaptureFixture
    ) -> None:
        """
        Without a recording span only the log line is written.
        """
        with caplog.at_level(logging.INFO):
            event_logger.log_custom_event("user-action")

        assert "Custom event: user-action" in caplog.text
