# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Tests for Azure Monitor configuration
"""

import pytest
from pytest_mock import MockerFixture
from opentelemetry.sdk.resources import SERVICE_NAME
from src.core.telemetry import configure_telemetry, resolve_connection_string
from src.core.telemetry.configure import CONNECTION_STRING_ENV_VARS

CONNECTION_STRING = "InstrumentationKey=00000000-0000-0000-0000-000000000000"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in CONNECTION_STRING_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestResolveConnectionString:
    """Tests for resolve_connection_string."""

    def test_unset(self) -> None:
        assert resolve_connection_string() is None

    def test_blank_is_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AZURE_MONITOR_CONNECTION_STRING", "   ")
        assert resolve_connection_string() is None

    def test_fallback_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APPLICATIONINSIGHTS_CONNECTION_STRING", CONNECTION_STRING)
        assert resolve_connection_string() == CONNECTION_STRING

    def test_azure_monitor_variable_first(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AZURE_MONITOR_CONNECTION_STRING", "first")
        monkeypatch.setenv("APPLICATIONINSIGHTS_CONNECTION_STRING", "second")
        assert resolve_connection_string() == "first"


class TestConfigureTelemetry:
    """Tests for configure_telemetry."""

    def test_without_connection_string(self, mocker: MockerFixture) -> None:
        """
        Nothing is configured when no connection string is available.
        """
        configure = mocker.patch("src.core.telemetry.configure.configure_azure_monitor")
        assert configure_telemetry() is False
        configure.assert_not_called()

    def test_with_explicit_connection_string(self, mocker: MockerFixture) -> None:
        configure = mocker.patch("src.core.telemetry.configure.configure_azure_monitor")

        assert configure_telemetry(CONNECTION_STRING, service_name="SimpleLog.Tests") is True

        configure.assert_called_once()
        kwargs = configure.call_args.kwargs
        assert kwargs["connection_string"] == CONNECTION_STRING
        assert kwargs["resource"].attributes[SERVICE_NAME] == "SimpleLog.Tests"

    def test_reads_environment(
        self, mocker: MockerFixture, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        configure = mocker.patch("src.core.telemetry.configure.configure_azure_monitor")
        monkeypatch.setenv("AZURE_MONITOR_CONNECTION_STRING", CONNECTION_STRING)

        assert configure_telemetry() is True
        assert configure.call_args.kwargs["connection_string"] == CONNECTION_STRING
