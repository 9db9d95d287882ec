# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Login and workflow action request/response models."""

from typing import Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exchanging camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LoginRequest(CamelModel):
    """A user login to track (LoginEvent attributes)."""

    user_id: Optional[str] = ""
    success: bool = True
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    method: Optional[str] = None
    properties: Optional[dict[str, str]] = None


class LoginResponse(CamelModel):
    """Confirmation that a login was tracked."""

    status: str = "logged"
    user_id: str
    success: bool


class WorkflowActionRequest(CamelModel):
    """A workflow action to track; the action comes from the route."""

    user_id: Optional[str] = ""
    role: Optional[str] = ""
    permission: Optional[str] = ""
    workflow_id: Optional[str] = ""
    workflow_state_id: Optional[str] = ""
    properties: Optional[dict[str, str]] = None


class WorkflowActionResponse(CamelModel):
    """Confirmation that a workflow action was tracked."""

    status: str = "logged"
    action: str
    user_id: str
    workflow_id: str
    workflow_state_id: str
