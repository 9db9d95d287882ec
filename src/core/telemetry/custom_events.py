# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Custom events on the current OpenTelemetry span.

Azure Monitor exports span events as custom events in Application Insights.
"""

import logging
from typing import Any, Dict, Optional

from opentelemetry import trace

from src.core.observability import StructuredLogger, get_logger
from src.core.telemetry.instruments import to_attribute

TRACE = 5
NO_LOGGING = logging.CRITICAL + 10

LOG_LEVEL_NAMES: Dict[str, int] = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "information": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
    "none": NO_LOGGING,
}

logging.addLevelName(TRACE, "TRACE")


def parse_log_level(name: Optional[str]) -> Optional[int]:
    """Parse a log level name, case-insensitively.

    :param name: One of Trace, Debug, Information, Warning, Error, Critical, None
    :returns: Logging level, or None if the name is not recognised
    :rtype: Optional[int]
    """
    if not name:
        return None
    return LOG_LEVEL_NAMES.get(name.strip().lower())


class CustomEventLogger:
    """
    Adds named events with positional attributes to the active span.
    """

    def __init__(self, logger: Optional[StructuredLogger] = None) -> None:
        self._logger = logger or get_logger(__name__)

    def log_custom_event(
        self,
        event_name: str,
        *attributes: Any,
        level: Optional[int] = None,
        exception: Optional[BaseException] = None,
    ) -> None:
        """Log a custom event.

        Attributes are recorded as ``attr0``, ``attr1``... on the span event;
        None values are skipped. The event is also written to the log.

        :param event_name: Name of the custom event
        :type event_name: str
        :param attributes: Additional attributes
        :param level: Logging level for the log line, INFO by default
        :type level: Optional[int]
        :param exception: Exception associated with the event
        :type exception: Optional[BaseException]
        :raises ValueError: If event_name is blank
        """
        if not event_name or not event_name.strip():
            raise ValueError("Event name cannot be null or empty.")

        span = trace.get_current_span()
        if span.is_recording():
            tags: Dict[str, Any] = {}
            if exception is not None:
                tags["exception.type"] = type(exception).__qualname__
                tags["exception.message"] = str(exception)
            for index, value in enumerate(attributes):
                if value is not None:
                    tags[f"attr{index}"] = to_attribute(value)
            span.add_event(event_name, attributes=tags)

        if exception is not None:
            self._logger.error("Custom event: %s", event_name, exc_info=exception)
            return

        log_level = logging.INFO if level is None else level
        if log_level < NO_LOGGING:
            self._logger.log(log_level, "Custom event: %s", event_name)
