# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Value objects for tracked business events."""

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

EventProperties = Dict[str, str]

USER_LOGIN_EVENT = "UserLogin"
WORKFLOW_ACTION_EVENT = "WorkflowAction"


@dataclass(frozen=True)
class ValidationError:
    """
    Describes why an event could not be tracked.

    Returned to the caller, never raised.
    """

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class TrackResult:
    """Outcome of a validate-then-emit call. Truthy on success."""

    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls) -> "TrackResult":
        return cls()

    @classmethod
    def failure(cls, message: str) -> "TrackResult":
        return cls(error=ValidationError(message))


@dataclass(frozen=True)
class TrackedEvent:
    """A named event paired with its property bag."""

    name: str
    properties: EventProperties = field(default_factory=dict)


def is_blank(value: Optional[str]) -> bool:
    """Check whether a value is None, empty or whitespace only.

    :param value: Value to check
    :type value: Optional[str]
    :returns: True if blank
    :rtype: bool
    """
    return value is None or not value.strip()


def merge_first_write_wins(
    base: Mapping[str, str],
    extra: Optional[Mapping[str, str]],
) -> EventProperties:
    """Merge extension properties into a base property bag.

    Keys already present in base are kept; new keys are appended in the
    order they appear in extra.

    :param base: Canonical properties
    :type base: Mapping[str, str]
    :param extra: Caller supplied extension properties
    :type extra: Optional[Mapping[str, str]]
    :returns: New merged property bag
    :rtype: EventProperties
    """
    merged: EventProperties = dict(base)
    if extra:
        for key, value in extra.items():
            merged.setdefault(key, value)
    return merged
