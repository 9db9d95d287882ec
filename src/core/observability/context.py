# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.
"""
Correlation context for log records.

The current correlation ID and operation name live in a ContextVar, so each
request (thread or asyncio task) sees its own values. StructuredLogger copies
them onto every record it writes.
"""

from __future__ import annotations
import uuid
from contextvars import ContextVar, Token
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ContextData:
    """Correlation fields attached to log records."""

    correlation_id: Optional[str] = None
    operation_name: Optional[str] = None

    def with_updates(self, **changes: Any) -> "ContextData":
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, str]:
        """Fields that are set, keyed by record attribute name."""
        return {key: value for key, value in asdict(self).items() if value is not None}


class ObservabilityContextManager:
    """
    Process-wide owner of the correlation ContextVar.

    Use instance(); reset_instance() exists so tests start from an empty
    context.
    """

    _instance: Optional["ObservabilityContextManager"] = None

    def __init__(self) -> None:
        self._var: ContextVar[ContextData] = ContextVar(
            "simplelog_correlation", default=ContextData()
        )

    @classmethod
    def instance(cls) -> "ObservabilityContextManager":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None

    def get(self) -> ContextData:
        return self._var.get()

    def set(self, data: ContextData) -> Token:
        return self._var.set(data)

    def reset(self, token: Token) -> None:
        self._var.reset(token)

    def update(self, **changes: Any) -> Token:
        """Replace some fields of the current context.

        :returns: Token restoring the previous context
        :rtype: Token
        """
        return self.set(self.get().with_updates(**changes))

    @property
    def correlation_id(self) -> Optional[str]:
        return self.get().correlation_id

    @property
    def operation_name(self) -> Optional[str]:
        return self.get().operation_name

    def set_correlation_id(self, value: Optional[str] = None) -> str:
        """Set the correlation ID, generating a UUID4 when value is empty.

        :param value: Correlation ID to use
        :type value: Optional[str]
        :returns: The correlation ID now in effect
        :rtype: str
        """
        correlation_id = value or str(uuid.uuid4())
        self.update(correlation_id=correlation_id)
        return correlation_id

    def clear_correlation_id(self) -> None:
        self.update(correlation_id=None)

    def get_all(self) -> Dict[str, str]:
        return self.get().to_dict()

    def clear(self) -> None:
        self.set(ContextData())


class ObservabilityScope:
    """
    ``with`` block that sets correlation fields and restores the previous
    values on exit.

    Fields left as None keep their outer value. With auto_correlation_id a
    fresh UUID is used when no correlation_id is given.
    """

    def __init__(
        self,
        correlation_id: Optional[str] = None,
        operation_name: Optional[str] = None,
        auto_correlation_id: bool = False,
    ) -> None:
        if correlation_id is None and auto_correlation_id:
            correlation_id = str(uuid.uuid4())
        self._changes = {
            key: value
            for key, value in (
                ("correlation_id", correlation_id),
                ("operation_name", operation_name),
            )
            if value is not None
        }
        self._manager = ObservabilityContextManager.instance()
        self._token: Optional[Token] = None

    def __enter__(self) -> "ObservabilityScope":
        if self._changes:
            self._token = self._manager.update(**self._changes)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._token is not None:
            self._manager.reset(self._token)
            self._token = None


class OperationScope(ObservabilityScope):
    """Names a unit of work inside the current request."""

    def __init__(self, operation_name: str, **kwargs: Any) -> None:
        super().__init__(operation_name=operation_name, **kwargs)


def get_correlation_id() -> Optional[str]:
    return ObservabilityContextManager.instance().correlation_id


def set_correlation_id(value: Optional[str] = None) -> str:
    return ObservabilityContextManager.instance().set_correlation_id(value)


def get_operation_name() -> Optional[str]:
    return ObservabilityContextManager.instance().operation_name


def clear_context() -> None:
    ObservabilityContextManager.instance().clear()
