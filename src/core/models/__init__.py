# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Pydantic request/response models for the SimpleLog API."""

from src.core.models.events import (
    LoginRequest,
    LoginResponse,
    WorkflowActionRequest,
    WorkflowActionResponse,
)
from src.core.models.weather import WeatherForecast

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "WorkflowActionRequest",
    "WorkflowActionResponse",
    "WeatherForecast",
]
