# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Business event enrichment: validate, build property bags and emit."""

from src.core.events.models import (
    EventProperties,
    TrackedEvent,
    TrackResult,
    ValidationError,
    USER_LOGIN_EVENT,
    WORKFLOW_ACTION_EVENT,
    merge_first_write_wins,
)
from src.core.events.login import USER_ID_REQUIRED, build_login_event, try_track_login
from src.core.events.workflow import (
    WORKFLOW_FIELDS_REQUIRED,
    build_workflow_action_event,
    try_track_workflow_action,
)

__all__ = [
    "EventProperties",
    "TrackedEvent",
    "TrackResult",
    "ValidationError",
    "USER_LOGIN_EVENT",
    "WORKFLOW_ACTION_EVENT",
    "merge_first_write_wins",
    "USER_ID_REQUIRED",
    "build_login_event",
    "try_track_login",
    "WORKFLOW_FIELDS_REQUIRED",
    "build_workflow_action_event",
    "try_track_workflow_action",
]
