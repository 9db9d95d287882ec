# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Fixtures for API tests."""

from typing import Any, Generator
import pytest
from pytest_mock import MockerFixture
from fastapi import FastAPI
from fastapi.testclient import TestClient
from src.api.errors import register_error_handlers
from src.api.routes import (
    set_app_insights_logger,
    set_azure_monitor_logger,
    set_custom_event_logger,
)


def create_test_app() -> FastAPI:
    """Create a minimal FastAPI app for testing."""
    from src.api.routes import (
        custom_events_router,
        health_router,
        login_router,
        monitoring_router,
        weather_router,
        workflow_router,
    )

    app = FastAPI(title="Test API")
    register_error_handlers(app)
    app.include_router(health_router)
    app.include_router(login_router, prefix="/api")
    app.include_router(workflow_router, prefix="/api")
    app.include_router(monitoring_router, prefix="/api")
    app.include_router(custom_events_router, prefix="/api")
    app.include_router(weather_router, prefix="/api")
    return app


@pytest.fixture
def azure_monitor_sink(mocker: MockerFixture) -> Any:
    """Provide a mock Azure Monitor sink."""
    return mocker.MagicMock()


@pytest.fixture
def app_insights_sink(mocker: MockerFixture) -> Any:
    """Provide a mock Application Insights sink."""
    return mocker.MagicMock()


@pytest.fixture
def custom_event_sink(mocker: MockerFixture) -> Any:
    """Provide a mock custom event logger."""
    return mocker.MagicMock()


@pytest.fixture
def client(
    azure_monitor_sink: Any,
    app_insights_sink: Any,
    custom_event_sink: Any,
) -> Generator[TestClient, None, None]:
    """Provide a test client with all sinks installed."""
    app = create_test_app()
    set_azure_monitor_logger(azure_monitor_sink)
    set_app_insights_logger(app_insights_sink)
    set_custom_event_logger(custom_event_sink)
    with TestClient(app) as test_client:
        yield test_client
    set_azure_monitor_logger(None)
    set_app_insights_logger(None)
    set_custom_event_logger(None)


@pytest.fixture
def unconfigured_client() -> Generator[TestClient, None, None]:
    """Provide a test client with no sinks installed."""
    set_azure_monitor_logger(None)
    set_app_insights_logger(None)
    set_custom_event_logger(None)
    with TestClient(create_test_app()) as test_client:
        yield test_client


@pytest.fixture
def workflow_payload() -> dict:
    """Provide a complete workflow action request body."""
    return {
        "userId": "u1",
        "role": "admin",
        "permission": "write",
        "workflowId": "wf1",
        "workflowStateId": "s1",
    }
