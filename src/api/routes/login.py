# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Login tracking API routes
"""

from fastapi import APIRouter, HTTPException
from src.api.routes.sinks import get_azure_monitor_logger
from src.core.events import USER_LOGIN_EVENT, try_track_login
from src.core.models.events import LoginRequest, LoginResponse
from src.core.observability import LogLevel, create_service_event, get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/login", tags=["login"])


@router.post("", response_model=LoginResponse)
async def login(request: LoginRequest) -> LoginResponse:
    """Track a user login as a UserLogin custom event.

    :param request: Login details and extension properties.
    :type request: LoginRequest
    :returns: Confirmation with the tracked user and outcome.
    :rtype: LoginResponse
    :raises HTTPException: If userId is blank (400 error).
    """
    sink = get_azure_monitor_logger()
    result = try_track_login(
        sink,
        request.user_id,
        request.success,
        request.ip_address,
        request.user_agent,
        request.method,
        request.properties,
    )
    if not result:
        logger.event(
            create_service_event(
                event="validation_failed",
                level=LogLevel.WARN,
                telemetry_name=USER_LOGIN_EVENT,
                error=str(result.error),
            )
        )
        raise HTTPException(status_code=400, detail=str(result.error))

    logger.event(
        create_service_event(
            event="telemetry_tracked",
            level=LogLevel.DEBUG,
            telemetry_name=USER_LOGIN_EVENT,
            user_id=request.user_id,
        )
    )
    sink.log_information(
        "User login tracked for %s (success: %s)", request.user_id, request.success
    )
    return LoginResponse(user_id=str(request.user_id), success=request.success)
