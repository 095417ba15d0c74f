"""
uvicorn-backed HTTP listener.

Runs an ASGI application on a host:port address and stops it under a
shutdown deadline. Signal handling is left to the lifecycle coordinator.
"""

import asyncio
import contextlib
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from concierge.domain.exceptions import HttpServerError, ShutdownTimeoutError
from concierge.domain.services import IHttpServer
from concierge.domain.value_objects import ShutdownDeadline
from concierge.infrastructure.monitoring import get_logger

logger = get_logger(__name__)


class _SignalFreeServer(uvicorn.Server):
    """uvicorn server that does not install its own signal handlers."""

    @contextlib.contextmanager
    def capture_signals(self):
        yield

    def install_signal_handlers(self) -> None:
        return None


def parse_address(address: str) -> tuple[str, int]:
    """
    Split a host:port address.

    Raises:
        HttpServerError: If the address is not host:port
    """
    host, _, port = address.rpartition(":")
    if not port.isdigit():
        raise HttpServerError(address, "address must be host:port")
    return host or "0.0.0.0", int(port)


class UvicornHttpServer(IHttpServer):
    """
    HTTP listener wrapping a FastAPI app in a uvicorn server.

    Attributes:
        app: ASGI application being served
        logger: Logger used for listener lifecycle events
    """

    def __init__(self, app: FastAPI):
        self.app = app
        self.logger = logger
        self._server: Optional[_SignalFreeServer] = None
        self._stopped = asyncio.Event()

    @property
    def started(self) -> bool:
        """Check if the listener finished startup and bound its socket."""
        return self._server is not None and self._server.started

    async def start(self, address: str) -> None:
        """
        Bind and serve until the listener stops.

        Args:
            address: Listener address in host:port form

        Raises:
            HttpServerError: If binding fails or startup is aborted
        """
        host, port = parse_address(address)

        config = uvicorn.Config(
            self.app,
            host=host,
            port=port,
            log_config=None,
        )
        self._server = _SignalFreeServer(config)
        self._stopped.clear()

        self.logger.info(f"HTTP server starting on http://{host}:{port}")

        try:
            await self._server.serve()
        except SystemExit as e:
            # uvicorn exits the process when it cannot bind
            raise HttpServerError(address, "could not bind listener") from e
        finally:
            self._stopped.set()

        if not self._server.started:
            raise HttpServerError(address, "listener stopped during startup")

        self.logger.info("HTTP server stopped")

    def static(self, path: str, directory: str) -> None:
        """
        Mount a static file handler.

        Routes registered before the mount keep precedence.

        Args:
            path: URL prefix to mount at
            directory: Filesystem directory to serve
        """
        self.app.mount(
            path,
            StaticFiles(directory=directory, html=True),
            name="static",
        )
        self.logger.info(f"Serving static files from {directory} at {path}")

    async def shutdown(self, deadline: ShutdownDeadline) -> None:
        """
        Stop accepting connections and wait for in-flight requests.

        Args:
            deadline: Time budget for draining

        Raises:
            ShutdownTimeoutError: If the deadline has already elapsed or
                requests are still running when it does
        """
        if self._server is None or self._stopped.is_set():
            return

        self._server.should_exit = True

        if deadline.expired():
            # Earlier shutdown steps used up the budget
            self._server.force_exit = True
            raise ShutdownTimeoutError("http", deadline.timeout)

        try:
            await asyncio.wait_for(
                self._stopped.wait(), timeout=deadline.remaining()
            )
        except asyncio.TimeoutError:
            self._server.force_exit = True
            raise ShutdownTimeoutError("http", deadline.timeout) from None
