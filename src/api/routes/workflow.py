# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Workflow action tracking API routes
"""

from fastapi import APIRouter, HTTPException
from src.api.routes.sinks import get_app_insights_logger
from src.core.events import WORKFLOW_ACTION_EVENT, try_track_workflow_action
from src.core.models.events import WorkflowActionRequest, WorkflowActionResponse
from src.core.observability import LogLevel, create_service_event, get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/workflow", tags=["workflow"])


def _track_workflow_action(request: WorkflowActionRequest, action: str) -> WorkflowActionResponse:
    """Track a workflow action and build the confirmation.

    :param request: Workflow identity fields and extension properties.
    :param action: Action taken, from the route.
    :raises HTTPException: If any required field is blank (400 error).
    """
    sink = get_app_insights_logger()
    result = try_track_workflow_action(
        sink,
        request.user_id,
        action,
        request.role,
        request.permission,
        request.workflow_id,
        request.workflow_state_id,
        request.properties,
    )
    if not result:
        logger.event(
            create_service_event(
                event="validation_failed",
                level=LogLevel.WARN,
                telemetry_name=WORKFLOW_ACTION_EVENT,
                error=str(result.error),
            )
        )
        raise HTTPException(status_code=400, detail=str(result.error))

    logger.event(
        create_service_event(
            event="telemetry_tracked",
            level=LogLevel.DEBUG,
            telemetry_name=WORKFLOW_ACTION_EVENT,
            user_id=request.user_id,
        )
    )
    sink.log_information(
        "Workflow action logged: %s for workflow %s", action, request.workflow_id
    )
    return WorkflowActionResponse(
        action=action,
        user_id=str(request.user_id),
        workflow_id=str(request.workflow_id),
        workflow_state_id=str(request.workflow_state_id),
    )


@router.post("/approve", response_model=WorkflowActionResponse)
async def approve(request: WorkflowActionRequest) -> WorkflowActionResponse:
    """Track an approval."""
    return _track_workflow_action(request, "approve")


@router.post("/sendback", response_model=WorkflowActionResponse)
async def send_back(request: WorkflowActionRequest) -> WorkflowActionResponse:
    """Track a send back."""
    return _track_workflow_action(request, "sendback")


@router.post("/reject", response_model=WorkflowActionResponse)
async def reject(request: WorkflowActionRequest) -> WorkflowActionResponse:
    """Track a rejection."""
    return _track_workflow_action(request, "reject")
