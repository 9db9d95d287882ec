# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.
"""
Structured logging on top of the standard logging module.

LoggerFactory owns root handler configuration; StructuredLogger injects the
current observability context into every record.
"""

from __future__ import annotations
import json
import logging
import sys
import threading
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from src.core.observability.context import ObservabilityContextManager
from src.core.observability.events import LogLevel, ServiceEvent

DEFAULT_SERVICE_NAME = "SimpleLog.Api"
LOG_FILE_NAME = "simplelog.log"
LOG_RETENTION_DAYS = 14
NOISY_LOGGERS = ("uvicorn.access", "httpx", "azure", "urllib3")

RESERVED_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
        "asctime",
    }
)

_EVENT_LEVELS = {
    LogLevel.DEBUG.value: logging.DEBUG,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.WARN.value: logging.WARNING,
    LogLevel.ERROR.value: logging.ERROR,
}


def safe_extra(extra: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Make caller supplied fields safe to pass as ``extra``.

    Keys colliding with LogRecord attributes get a trailing underscore.

    :param extra: Fields to attach to a record
    :returns: Fields with reserved names renamed
    """
    if not extra:
        return {}
    return {(f"{k}_" if k in RESERVED_ATTRS else k): v for k, v in extra.items()}


def record_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Return the non-standard attributes attached to a record."""
    fields: Dict[str, Any] = {}
    for key, value in record.__dict__.items():
        if key in RESERVED_ATTRS or key.startswith("_"):
            continue
        if isinstance(value, (str, int, float, bool, type(None))):
            fields[key] = value
        else:
            fields[key] = str(value)
    return fields


class ApplicationFilter(logging.Filter):
    """Stamp every record with the application name."""

    def __init__(self, service_name: str) -> None:
        super().__init__()
        self.service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "application"):
            record.application = self.service_name
        return True


class LogFormatter(logging.Formatter, ABC):
    """Base class for the service formatters."""

    @abstractmethod
    def format(self, record: logging.LogRecord) -> str:
        """Format a log record."""


class JSONFormatter(LogFormatter):
    """
    One JSON object per line, including context and extra fields.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record_fields(record).items():
            entry.setdefault(key, value)
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class ConsoleFormatter(LogFormatter):
    """
    Human readable single line output for local development.
    """

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        correlation_id = getattr(record, "correlation_id", None)
        if correlation_id:
            line = f"{line} [cid={correlation_id}]"
        return line


class StructuredLogger:
    """
    Logger that merges observability context into each record.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._logger = logging.getLogger(name)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def is_enabled_for(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)

    def log(
        self,
        level: int,
        msg: str,
        *args: Any,
        exc_info: Any = None,
        extra: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """Log a message at level with context and extra fields attached.

        :param level: Standard logging level
        :param msg: Message, %-style when args are given
        :param exc_info: Exception or exc_info tuple
        :param extra: Additional structured fields
        """
        if not self._logger.isEnabledFor(level):
            return
        self._logger.log(
            level, msg, *args, exc_info=exc_info, extra=self._fields(extra), stacklevel=3
        )

    def always(
        self, level: int, msg: str, extra: Optional[Mapping[str, Any]] = None
    ) -> None:
        """Write a record whatever the logger level is.

        Handlers still apply their own levels and filters.

        :param level: Level stamped on the record
        :param msg: Message
        :param extra: Additional structured fields
        """
        if self._logger.disabled:
            return
        record = self._logger.makeRecord(
            self._logger.name, level, "(unknown file)", 0, msg, (), None, extra=self._fields(extra)
        )
        self._logger.handle(record)

    @staticmethod
    def _fields(extra: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """Extra fields with the observability context applied last."""
        fields = safe_extra(extra)
        fields.update(ObservabilityContextManager.instance().get_all())
        return fields

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.log(logging.ERROR, msg, *args, **kwargs)

    def critical(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.log(logging.CRITICAL, msg, *args, **kwargs)

    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("exc_info", True)
        self.log(logging.ERROR, msg, *args, **kwargs)

    def event(self, event: ServiceEvent) -> None:
        """Log a typed service event.

        :param event: Event to log; its fields become record attributes
        :type event: ServiceEvent
        """
        level = _EVENT_LEVELS.get(str(event.level), logging.INFO)
        fields = event.model_dump(mode="json", exclude_none=True)
        self.log(level, event.event, extra=fields)


class LoggerFactory:
    """
    Configures root logging once and hands out StructuredLogger instances.
    """

    _lock = threading.Lock()
    _loggers: Dict[str, StructuredLogger] = {}
    _handlers: list[logging.Handler] = []
    _initialized = False

    @classmethod
    def initialize(
        cls,
        level: Union[int, str] = logging.INFO,
        log_format: str = "console",
        log_dir: Optional[Union[str, Path]] = None,
        service_name: str = DEFAULT_SERVICE_NAME,
    ) -> None:
        """Configure the root logger.

        Calling again replaces the handlers installed by a previous call.

        :param level: Root log level
        :param log_format: "json" or "console"
        :param log_dir: Directory for daily rotated log files, None disables
        :param service_name: Value stamped as ``application`` on each record
        """
        with cls._lock:
            root = logging.getLogger()
            for handler in cls._handlers:
                root.removeHandler(handler)
                handler.close()
            cls._handlers = []

            formatter: LogFormatter = (
                JSONFormatter() if log_format.lower() == "json" else ConsoleFormatter()
            )
            app_filter = ApplicationFilter(service_name)

            stream_handler = logging.StreamHandler(sys.stdout)
            stream_handler.setFormatter(formatter)
            stream_handler.addFilter(app_filter)
            cls._handlers.append(stream_handler)

            if log_dir:
                path = Path(log_dir)
                path.mkdir(parents=True, exist_ok=True)
                file_handler = TimedRotatingFileHandler(
                    path / LOG_FILE_NAME,
                    when="midnight",
                    backupCount=LOG_RETENTION_DAYS,
                    encoding="utf-8",
                    utc=True,
                )
                file_handler.setFormatter(JSONFormatter())
                file_handler.addFilter(app_filter)
                cls._handlers.append(file_handler)

            for handler in cls._handlers:
                root.addHandler(handler)
            root.setLevel(level)
            for name in NOISY_LOGGERS:
                logging.getLogger(name).setLevel(logging.WARNING)
            cls._initialized = True

    @classmethod
    def is_initialized(cls) -> bool:
        return cls._initialized

    @classmethod
    def get_logger(cls, name: str) -> StructuredLogger:
        """Get (or create) the StructuredLogger for name."""
        with cls._lock:
            if name not in cls._loggers:
                cls._loggers[name] = StructuredLogger(name)
            return cls._loggers[name]

    @classmethod
    def shutdown(cls) -> None:
        """Flush and remove the handlers installed by initialize."""
        with cls._lock:
            root = logging.getLogger()
            for handler in cls._handlers:
                handler.flush()
                root.removeHandler(handler)
                handler.close()
            cls._handlers = []
            cls._initialized = False


def initialize_logging(
    level: Union[int, str] = logging.INFO,
    log_format: str = "console",
    log_dir: Optional[Union[str, Path]] = None,
    service_name: str = DEFAULT_SERVICE_NAME,
) -> None:
    """Initialize logging for the process. See LoggerFactory.initialize."""
    LoggerFactory.initialize(
        level=level,
        log_format=log_format,
        log_dir=log_dir,
        service_name=service_name,
    )


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger."""
    return LoggerFactory.get_logger(name)


def clear_correlation_id() -> None:
    """Remove the correlation ID from the current context."""
    ObservabilityContextManager.instance().clear_correlation_id()
