"""
Prometheus metrics middleware for FastAPI.
"""

import time
from typing import Callable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.routing import Match, Mount

from concierge.infrastructure.monitoring import metrics

UNMATCHED_ENDPOINT = "unmatched"


def _error_type(status_code: int) -> Optional[str]:
    if status_code >= 500:
        return "server_error"
    if status_code >= 400:
        return "client_error"
    return None


def endpoint_label(request: Request) -> str:
    """
    Bounded endpoint label for a request.

    Routes are labelled by their path template, mounts (static files) by
    their name, and anything else by UNMATCHED_ENDPOINT, so arbitrary
    request paths never create new series.
    """
    partial = None
    for route in request.app.router.routes:
        match, _ = route.matches(request.scope)
        if match == Match.FULL:
            return _route_label(route)
        if match == Match.PARTIAL and partial is None:
            partial = route

    if partial is not None:
        return _route_label(partial)
    return UNMATCHED_ENDPOINT


def _route_label(route) -> str:
    if isinstance(route, Mount):
        return route.name or route.path or "/"
    return getattr(route, "path", UNMATCHED_ENDPOINT)


class MetricsMiddleware(BaseHTTPMiddleware):
    """
    Record request count, latency and errors per method and endpoint.

    A handler that raises is counted as a 500 with the exception class
    as its error type; the exception is re-raised unchanged.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        labels = {"method": request.method, "endpoint": endpoint_label(request)}
        started = time.perf_counter()
        status_code = 500
        error_type: Optional[str] = None

        try:
            response = await call_next(request)
            status_code = response.status_code
            error_type = _error_type(status_code)
            return response
        except Exception as e:
            error_type = type(e).__name__
            raise
        finally:
            metrics.http_request_duration_seconds.labels(**labels).observe(
                time.perf_counter() - started
            )
            metrics.http_requests_total.labels(status=status_code, **labels).inc()
            if error_type is not None:
                metrics.http_errors_total.labels(
                    error_type=error_type, **labels
                ).inc()
