# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
FastAPI application for SimpleLog.
"""

import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncGenerator
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from src.core.observability import (
    initialize_logging,
    get_logger,
    add_observability_middleware,
)
from src.core.telemetry import (
    AppInsightsLogger,
    AzureMonitorLogger,
    CustomEventLogger,
    configure_telemetry,
)
from src.api.routes import (
    health_router,
    login_router,
    workflow_router,
    monitoring_router,
    custom_events_router,
    weather_router,
    set_app_insights_logger,
    set_azure_monitor_logger,
    set_custom_event_logger,
)
from src.api.errors import register_error_handlers
from src.api.routes.health import SERVICE_NAME, SERVICE_VERSION, set_service_status

API_PREFIX = "/api"
LOG_FORMAT = os.environ.get("LOG_FORMAT", "console")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
LOG_DIR = os.environ.get("LOG_DIR") or None
CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "http://localhost:3000,http://localhost:8000").split(
    ","
)

initialize_logging(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    log_format=LOG_FORMAT,
    log_dir=LOG_DIR,
    service_name=SERVICE_NAME,
)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup/shutdown.

    Configures Azure Monitor export and installs the telemetry sinks used
    by the routes. Sinks are also stored in app.state.

    :param app: FastAPI application instance.
    :type app: FastAPI
    :yields: None
    """
    try:
        logger.info("Initializing SimpleLog API...")
        exporting = configure_telemetry(service_name=SERVICE_NAME)
        custom_event_logger = CustomEventLogger()
        app_insights_logger = AppInsightsLogger()
        azure_monitor_logger = AzureMonitorLogger(custom_event_logger=custom_event_logger)
        app.state.app_insights_logger = app_insights_logger
        app.state.azure_monitor_logger = azure_monitor_logger
        app.state.custom_event_logger = custom_event_logger
        set_app_insights_logger(app_insights_logger)
        set_azure_monitor_logger(azure_monitor_logger)
        set_custom_event_logger(custom_event_logger)
        set_service_status("azure_monitor", exporting)
        logger.info("SimpleLog API initialized successfully")
        yield

    except Exception as e:
        logger.error(f"Failed to initialize SimpleLog API: {e}", exc_info=True)
        raise

    finally:
        logger.info("Shutting down SimpleLog API...")
        set_service_status("azure_monitor", False)
        set_app_insights_logger(None)
        set_azure_monitor_logger(None)
        set_custom_event_logger(None)
        logger.info("SimpleLog API shutdown complete")


app = FastAPI(
    title="SimpleLog API",
    description="Application Insights / Azure Monitor telemetry demonstration API",
    version=SERVICE_VERSION,
    lifespan=lifespan,
)
register_error_handlers(app)
add_observability_middleware(app)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(health_router)
app.include_router(login_router, prefix=API_PREFIX)
app.include_router(workflow_router, prefix=API_PREFIX)
app.include_router(monitoring_router, prefix=API_PREFIX)
app.include_router(custom_events_router, prefix=API_PREFIX)
app.include_router(weather_router, prefix=API_PREFIX)
