# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Tests for the process entry point."""

import pytest
from pytest_mock import MockerFixture
from src.api import main as entry_point


class TestMain:
    """Tests for main()."""

    def test_runs_uvicorn(self, mocker: MockerFixture, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "9001")
        run = mocker.patch.object(entry_point.uvicorn, "run")
        close = mocker.patch.object(entry_point.BootstrapLogger, "close_and_flush")

        assert entry_point.main() == 0

        run.assert_called_once()
        assert run.call_args.args == ("src.api.app:app",)
        assert run.call_args.kwargs["port"] == 9001
        close.assert_called_once()

    def test_startup_failure_is_fatal(self, mocker: MockerFixture) -> None:
        """
        A crash while serving is logged as fatal and yields exit code 1.
        """
        mocker.patch.object(entry_point.uvicorn, "run", side_effect=OSError("port in use"))
        fatal = mocker.patch.object(entry_point.BootstrapLogger, "fatal")
        close = mocker.patch.object(entry_point.BootstrapLogger, "close_and_flush")

        assert entry_point.main() == 1

        exception, message = fatal.call_args.args
        assert isinstance(exception, OSError)
        assert message == "Application terminated unexpectedly"
        close.assert_called_once()
