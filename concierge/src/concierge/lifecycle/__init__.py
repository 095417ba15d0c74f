"""
Process lifecycle management.

Builds the coordinator and handles its graceful shutdown.
"""

from concierge.lifecycle.server import (
    SHUTDOWN_TIMEOUT_SECONDS,
    Server,
    new_server,
)
from concierge.lifecycle.signals import InterruptSignal, ShutdownSignal

__all__ = [
    "SHUTDOWN_TIMEOUT_SECONDS",
    "Server",
    "new_server",
    "InterruptSignal",
    "ShutdownSignal",
]
