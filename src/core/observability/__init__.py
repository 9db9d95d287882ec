# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.
"""
Logging and request correlation for SimpleLog.

Initialize once at startup, then log through get_logger():

    from src.core.observability import initialize_logging, get_logger

    initialize_logging(level=logging.INFO, log_format="json", log_dir="logs")
    logger = get_logger(__name__)
    logger.info("Login tracked for %s", user_id)

Records written inside an ObservabilityScope (every API request runs in one)
carry its correlation_id and operation_name.
"""

from src.core.observability.context import (
    ContextData,
    ObservabilityContextManager,
    ObservabilityScope,
    OperationScope,
    clear_context,
    get_correlation_id,
    get_operation_name,
    set_correlation_id,
)
from src.core.observability.events import (
    LogLevel,
    ServiceEvent,
    create_service_event,
    request_status,
)
from src.core.observability.logger import (
    ConsoleFormatter,
    JSONFormatter,
    LogFormatter,
    LoggerFactory,
    StructuredLogger,
    clear_correlation_id,
    get_logger,
    initialize_logging,
)
from src.core.observability.bootstrap import BootstrapLogger
from src.core.observability.middleware import (
    CORRELATION_ID_HEADER,
    ObservabilityMiddleware,
    add_observability_middleware,
)

__all__ = [
    "ContextData",
    "ObservabilityContextManager",
    "ObservabilityScope",
    "OperationScope",
    "clear_context",
    "get_correlation_id",
    "get_operation_name",
    "set_correlation_id",
    "LogLevel",
    "ServiceEvent",
    "create_service_event",
    "request_status",
    "ConsoleFormatter",
    "JSONFormatter",
    "LogFormatter",
    "LoggerFactory",
    "StructuredLogger",
    "clear_correlation_id",
    "get_logger",
    "initialize_logging",
    "BootstrapLogger",
    "CORRELATION_ID_HEADER",
    "ObservabilityMiddleware",
    "add_observability_middleware",
]
