# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Azure Monitor OpenTelemetry configuration.
"""

import os
from typing import Optional

from azure.monitor.opentelemetry import configure_azure_monitor
from opentelemetry.sdk.resources import SERVICE_NAME, Resource

from src.core.observability import get_logger
from src.core.observability.logger import DEFAULT_SERVICE_NAME

CONNECTION_STRING_ENV_VARS = (
    "AZURE_MONITOR_CONNECTION_STRING",
    "APPLICATIONINSIGHTS_CONNECTION_STRING",
)

logger = get_logger(__name__)


def resolve_connection_string() -> Optional[str]:
    """Read the Azure Monitor connection string from the environment.

    :returns: First non-blank value of CONNECTION_STRING_ENV_VARS, or None
    :rtype: Optional[str]
    """
    for name in CONNECTION_STRING_ENV_VARS:
        value = os.environ.get(name, "").strip()
        if value:
            return value
    return None


def configure_telemetry(
    connection_string: Optional[str] = None,
    service_name: str = DEFAULT_SERVICE_NAME,
) -> bool:
    """Install the Azure Monitor exporters for traces, metrics and logs.

    Without a connection string nothing is exported and telemetry stays in
    the local log output.

    :param connection_string: Explicit connection string, else read from env
    :type connection_string: Optional[str]
    :param service_name: Cloud role name reported to Application Insights
    :type service_name: str
    :returns: True if Azure Monitor was configured
    :rtype: bool
    """
    connection_string = connection_string or resolve_connection_string()
    if not connection_string:
        logger.warning(
            "Azure Monitor connection string not configured; telemetry limited to local logs"
        )
        return False

    configure_azure_monitor(
        connection_string=connection_string,
        resource=Resource.create({SERVICE_NAME: service_name}),
    )
    logger.info("Azure Monitor telemetry configured for %s", service_name)
    return True
