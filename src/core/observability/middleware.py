# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.
"""
Request correlation for the SimpleLog API.

Every request outside SKIP_PATHS runs inside an observability scope whose
correlation ID comes from the ``X-Correlation-ID`` header (or a new UUID) and
whose operation name is ``"<METHOD> <path>"``. Everything logged while the
request is handled, including telemetry sink output, carries both values.
"""

from __future__ import annotations
import time
import uuid
from typing import Any, Optional
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from src.core.observability.context import ObservabilityScope
from src.core.observability.events import create_service_event, request_status
from src.core.observability.logger import get_logger

CORRELATION_ID_HEADER = "X-Correlation-ID"
FORWARDED_FOR_HEADER = "X-Forwarded-For"
SKIP_PATHS = {"/healthz", "/favicon.ico", "/metrics", "/docs", "/openapi.json"}

logger = get_logger(__name__)


def operation_name_for(request: Request) -> str:
    """Operation name reported for a request, e.g. ``POST /api/login``."""
    return f"{request.method} {request.url.path}"


class ObservabilityMiddleware(BaseHTTPMiddleware):
    """
    Scopes each request and logs request_start / request_end service events.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Run the request inside its observability scope.

        The correlation ID is echoed in the response header. Exceptions are
        logged as a 500 request_end and re-raised.

        :param request: Incoming request
        :type request: Request
        :param call_next: Next handler in chain
        :type call_next: RequestResponseEndpoint
        :returns: Response
        :rtype: Response
        """
        if request.url.path in SKIP_PATHS:
            return await call_next(request)

        correlation_id = request.headers.get(CORRELATION_ID_HEADER) or str(uuid.uuid4())
        with ObservabilityScope(
            correlation_id=correlation_id,
            operation_name=operation_name_for(request),
        ):
            self._log_request_start(request)
            started = time.perf_counter()
            try:
                response = await call_next(request)
            except Exception as exc:
                self._log_request_end(request, 500, started, error=exc)
                raise
            self._log_request_end(request, response.status_code, started)
            response.headers[CORRELATION_ID_HEADER] = correlation_id
            return response

    def _log_request_start(self, request: Request) -> None:
        logger.event(
            create_service_event(
                event="request_start",
                http_method=request.method,
                http_path=request.url.path,
                client_ip=self._get_client_ip(request),
                user_agent=request.headers.get("User-Agent"),
            )
        )

    @staticmethod
    def _log_request_end(
        request: Request,
        status_code: int,
        started: float,
        error: Optional[Exception] = None,
    ) -> None:
        """Log the request_end event.

        :param request: Handled request
        :param status_code: Response status, 500 when the handler raised
        :param started: perf_counter() value when handling began
        :param error: Exception raised by the handler, if any
        """
        status, level = request_status(status_code)
        logger.event(
            create_service_event(
                event="request_end",
                level=level,
                status=status,
                http_method=request.method,
                http_path=request.url.path,
                http_status_code=status_code,
                duration_ms=int((time.perf_counter() - started) * 1000),
                error=str(error) if error else None,
            )
        )

    @staticmethod
    def _get_client_ip(request: Request) -> Optional[str]:
        """First address in X-Forwarded-For, else the socket peer."""
        forwarded_for = request.headers.get(FORWARDED_FOR_HEADER)
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()
        return request.client.host if request.client else None


def add_observability_middleware(app: Any) -> None:
    """Install ObservabilityMiddleware on app.

    :param app: FastAPI application instance
    :type app: FastAPI
    """
    app.add_middleware(ObservabilityMiddleware)
