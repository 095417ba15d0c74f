"""
HTTP server interface.

Defines the operations the coordinator needs from the HTTP listener:
running it, registering static files and stopping it under a deadline.
"""

import logging
from abc import ABC, abstractmethod

from concierge.domain.value_objects import ShutdownDeadline


class IHttpServer(ABC):
    """Abstract interface for the HTTP listener owned by the coordinator."""

    logger: logging.Logger

    @abstractmethod
    async def start(self, address: str) -> None:
        """
        Bind and serve until the listener stops.

        Args:
            address: Listener address in host:port form

        Raises:
            HttpServerError: If binding fails or serving stops abnormally
        """

    @abstractmethod
    def static(self, path: str, directory: str) -> None:
        """
        Register a static file handler.

        Args:
            path: URL prefix to mount at
            directory: Filesystem directory to serve
        """

    @abstractmethod
    async def shutdown(self, deadline: ShutdownDeadline) -> None:
        """
        Stop accepting connections and drain in-flight requests.

        Args:
            deadline: Time budget for draining

        Raises:
            ShutdownTimeoutError: If draining outlives the deadline
        """
