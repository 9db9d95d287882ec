# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.
"""
Process-level startup logger.

Owned by the entry point: initialize before anything else logs, close and
flush on shutdown. Library code never calls it.
"""

import logging
from typing import Optional

from src.core.observability.logger import DEFAULT_SERVICE_NAME, LoggerFactory, get_logger

BOOTSTRAP_LOGGER_NAME = "simplelog.bootstrap"


class BootstrapLogger:
    """Startup logging wrapper around LoggerFactory."""

    @staticmethod
    def initialize(service_name: Optional[str] = None, log_format: str = "console") -> None:
        """Configure console logging at DEBUG for early startup.

        Does nothing if logging was already initialized.
        """
        if LoggerFactory.is_initialized():
            return
        LoggerFactory.initialize(
            level=logging.DEBUG,
            log_format=log_format,
            service_name=service_name or DEFAULT_SERVICE_NAME,
        )

    @staticmethod
    def information(message: str) -> None:
        get_logger(BOOTSTRAP_LOGGER_NAME).info(message)

    @staticmethod
    def fatal(exception: BaseException, message: str) -> None:
        """Log a fatal startup error with its traceback."""
        get_logger(BOOTSTRAP_LOGGER_NAME).critical(message, exc_info=exception)

    @staticmethod
    def close_and_flush() -> None:
        LoggerFactory.shutdown()
