"""
FastAPI dependencies for Concierge API.

Route handlers reach the lifecycle coordinator through the application
state set by new_router().
"""

from typing import TYPE_CHECKING

from fastapi import Request

if TYPE_CHECKING:
    from concierge.lifecycle.server import Server


def get_server(request: Request) -> "Server":
    """
    Get the coordinator that owns this application.

    Raises:
        RuntimeError: If the app was not built by new_router()
    """
    server = getattr(request.app.state, "server", None)
    if server is None:
        raise RuntimeError("Server not attached to application")
    return server
