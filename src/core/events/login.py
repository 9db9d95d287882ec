# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
User login event tracking.
"""

from typing import Mapping, Optional

from src.core.events.models import (
    USER_LOGIN_EVENT,
    TrackedEvent,
    TrackResult,
    is_blank,
    merge_first_write_wins,
)
from src.core.telemetry.interfaces import TelemetrySink

USER_ID_REQUIRED = "userId is required."


def build_login_event(
    user_id: str,
    success: bool,
    ip_address: Optional[str] = None,
    user_agent: Optional[str] = None,
    method: Optional[str] = None,
    extra_properties: Optional[Mapping[str, str]] = None,
) -> TrackedEvent:
    """Build the UserLogin event with canonical keys first.

    :param user_id: Non-blank user identifier
    :param success: Whether the login succeeded
    :param ip_address: Client IP address
    :param user_agent: Client user agent
    :param method: Authentication method
    :param extra_properties: Extension properties, never overriding canonical keys
    :returns: Event ready to hand to a sink
    :rtype: TrackedEvent
    """
    properties = {
        "userId": user_id,
        "success": str(bool(success)),
        "ipAddress": ip_address or "",
        "userAgent": user_agent or "",
        "method": method or "",
    }
    return TrackedEvent(
        name=USER_LOGIN_EVENT,
        properties=merge_first_write_wins(properties, extra_properties),
    )


def try_track_login(
    sink: TelemetrySink,
    user_id: Optional[str],
    success: bool = True,
    ip_address: Optional[str] = None,
    user_agent: Optional[str] = None,
    method: Optional[str] = None,
    extra_properties: Optional[Mapping[str, str]] = None,
) -> TrackResult:
    """Validate and track a user login as a custom event.

    Nothing is emitted when validation fails. Errors raised by the sink
    propagate to the caller.

    :param sink: Telemetry sink receiving the event
    :type sink: TelemetrySink
    :param user_id: User identifier, required
    :type user_id: Optional[str]
    :param success: Whether the login succeeded
    :type success: bool
    :param ip_address: Client IP address
    :type ip_address: Optional[str]
    :param user_agent: Client user agent
    :type user_agent: Optional[str]
    :param method: Authentication method
    :type method: Optional[str]
    :param extra_properties: Extension properties
    :type extra_properties: Optional[Mapping[str, str]]
    :returns: Success, or the validation error
    :rtype: TrackResult
    :raises ValueError: If sink is None
    """
    if sink is None:
        raise ValueError("sink is required")

    if is_blank(user_id):
        return TrackResult.failure(USER_ID_REQUIRED)

    event = build_login_event(
        user_id=str(user_id),
        success=success,
        ip_address=ip_address,
        user_agent=user_agent,
        method=method,
        extra_properties=extra_properties,
    )
    sink.track_event(event.name, event.properties)
    return TrackResult.success()
