# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Workflow action event tracking.
"""

from typing import Mapping, Optional

from src.core.events.models import (
    WORKFLOW_ACTION_EVENT,
    TrackedEvent,
    TrackResult,
    is_blank,
    merge_first_write_wins,
)
from src.core.telemetry.interfaces import TelemetrySink

WORKFLOW_FIELDS_REQUIRED = (
    "All fields are required: userId, action, role, permission, workflowId, workflowStateId."
)


def build_workflow_action_event(
    user_id: str,
    action: str,
    role: str,
    permission: str,
    workflow_id: str,
    workflow_state_id: str,
    extra_properties: Optional[Mapping[str, str]] = None,
) -> TrackedEvent:
    """Build the WorkflowAction event.

    The state key is emitted as ``workflowstateid``, all lower case.
    """
    properties = {
        "userId": user_id,
        "action": action,
        "role": role,
        "permission": permission,
        "workflowId": workflow_id,
        "workflowstateid": workflow_state_id,
    }
    return TrackedEvent(
        name=WORKFLOW_ACTION_EVENT,
        properties=merge_first_write_wins(properties, extra_properties),
    )


def try_track_workflow_action(
    sink: TelemetrySink,
    user_id: Optional[str],
    action: Optional[str],
    role: Optional[str],
    permission: Optional[str],
    workflow_id: Optional[str],
    workflow_state_id: Optional[str],
    extra_properties: Optional[Mapping[str, str]] = None,
) -> TrackResult:
    """Validate and track a workflow action as a custom event.

    All six identity fields are required. Nothing is emitted when any is
    blank.

    :param sink: Telemetry sink receiving the event
    :type sink: TelemetrySink
    :param user_id: Acting user
    :param action: Workflow action, e.g. approve
    :param role: Role of the acting user
    :param permission: Permission exercised
    :param workflow_id: Workflow identifier
    :param workflow_state_id: Workflow state identifier
    :param extra_properties: Extension properties
    :returns: Success, or the validation error
    :rtype: TrackResult
    :raises ValueError: If sink is None
    """
    if sink is None:
        raise ValueError("sink is required")

    required = (user_id, action, role, permission, workflow_id, workflow_state_id)
    if any(is_blank(value) for value in required):
        return TrackResult.failure(WORKFLOW_FIELDS_REQUIRED)

    event = build_workflow_action_event(
        user_id=str(user_id),
        action=str(action),
        role=str(role),
        permission=str(permission),
        workflow_id=str(workflow_id),
        workflow_state_id=str(workflow_state_id),
        extra_properties=extra_properties,
    )
    sink.track_event(event.name, event.properties)
    return TrackResult.success()
