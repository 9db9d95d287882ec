# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Shared fixtures for core module tests."""

import tempfile
from pathlib import Path
from typing import Any, Callable, Generator
import pytest
from pytest_mock import MockerFixture
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import InMemoryMetricReader
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import Tracer
from src.core.observability import LoggerFactory, ObservabilityContextManager


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_sink(mocker: MockerFixture) -> Any:
    return mocker.MagicMock()


@pytest.fixture
def span_exporter() -> InMemorySpanExporter:
    return InMemorySpanExporter()


@pytest.fixture
def tracer(span_exporter: InMemorySpanExporter) -> Tracer:
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    return provider.get_tracer("tests")


@pytest.fixture
def metric_reader() -> InMemoryMetricReader:
    return InMemoryMetricReader()


@pytest.fixture
def meter(metric_reader: InMemoryMetricReader) -> Any:
    return MeterProvider(metric_readers=[metric_reader]).get_meter("tests")


@pytest.fixture(autouse=True)
def fresh_context() -> Generator[None, None, None]:
    ObservabilityContextManager.reset_instance()
    yield
    ObservabilityContextManager.reset_instance()


@pytest.fixture
def restore_logging() -> Generator[None, None, None]:
    """Undo LoggerFactory handler changes made by a test."""
    yield
    LoggerFactory.shutdown()


@pytest.fixture
def histogram_points(metric_reader: InMemoryMetricReader) -> Callable[[str], list]:
    """Collect the histogram data points recorded under a metric name."""

    def collect(name: str) -> list:
        data = metric_reader.get_metrics_data()
        points: list = []
        if data is None:
            return points
        for resource_metrics in data.resource_metrics:
            for scope_metrics in resource_metrics.scope_metrics:
                for metric in scope_metrics.metrics:
                    if metric.name == name:
                        points.extend(metric.data.data_points)
        return points

    return collect
