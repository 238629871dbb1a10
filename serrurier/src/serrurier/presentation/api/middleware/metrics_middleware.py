"""
Prometheus metrics middleware for FastAPI.
"""

import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.routing import Match

from serrurier.infrastructure.monitoring import metrics


def _endpoint_label(request: Request) -> str:
    """Route template for the request, so unknown paths share one label."""
    for route in request.app.routes:
        match, _ = route.matches(request.scope)
        if match == Match.FULL:
            return getattr(route, "path", request.url.path)
    return "unmatched"


class MetricsMiddleware(BaseHTTPMiddleware):
    """
    Middleware to collect HTTP metrics.

    Records:
    - Request count by method/endpoint/status
    - Request duration by method/endpoint
    - Error count by method/endpoint/type
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process request and collect metrics.

        Args:
            request: FastAPI request
            call_next: Next middleware/handler

        Returns:
            Response from handler
        """
        endpoint = _endpoint_label(request)
        method = request.method

        start_time = time.time()

        try:
            response = await call_next(request)

            duration = time.time() - start_time
            metrics.http_request_duration_seconds.labels(
                method=method,
                endpoint=endpoint,
            ).observe(duration)

            metrics.http_requests_total.labels(
                method=method,
                endpoint=endpoint,
                status=response.status_code,
            ).inc()

            if response.status_code >= 400:
                error_type = (
                    "client_error" if response.status_code < 500 else "server_error"
                )
                metrics.http_errors_total.labels(
                    method=method,
                    endpoint=endpoint,
                    error_type=error_type,
                ).inc()

            return response

        except Exception as e:
            duration = time.time() - start_time
            metrics.http_request_duration_seconds.labels(
                method=method,
                endpoint=endpoint,
            ).observe(duration)

            metrics.http_errors_total.labels(
                method=method,
                endpoint=endpoint,
                error_type=type(e).__name__,
            ).inc()

            raise
