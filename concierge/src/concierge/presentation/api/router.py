"""
HTTP router factory.

Builds the FastAPI application for a coordinator and wraps it in the
uvicorn listener the coordinator starts and stops.
"""

from typing import TYPE_CHECKING

from fastapi import FastAPI, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from concierge.domain.exceptions import ConciergeException
from concierge.infrastructure.http import UvicornHttpServer
from concierge.infrastructure.monitoring import get_logger
from concierge.presentation.api.middleware import (
    MetricsMiddleware,
    RequestIDMiddleware,
    concierge_exception_handler,
)
from concierge.presentation.api.routes import health

if TYPE_CHECKING:
    from concierge.lifecycle.server import Server

logger = get_logger(__name__)


def new_router(server: "Server") -> UvicornHttpServer:
    """
    Create the HTTP listener for a coordinator.

    Args:
        server: Coordinator whose accessors the handlers use

    Returns:
        Listener ready to start
    """
    settings = server.config

    app = FastAPI(
        title=f"{settings.APP_NAME} API",
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
    )
    app.state.server = server

    # Middleware chain (last added runs first)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.add_exception_handler(ConciergeException, concierge_exception_handler)

    app.include_router(health.router)

    if settings.METRICS_ENABLED:

        @app.get("/metrics", tags=["Monitoring"])
        async def metrics():
            """Prometheus metrics in text format."""
            return Response(
                content=generate_latest(),
                media_type=CONTENT_TYPE_LATEST,
            )

    logger.debug("Router created")
    return UvicornHttpServer(app)
