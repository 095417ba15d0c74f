"""
Domain exceptions for Concierge.
"""

from concierge.domain.exceptions.base import ConciergeException
from concierge.domain.exceptions.lifecycle import (
    DatabaseConnectionError,
    HttpServerError,
    ShutdownError,
    ShutdownTimeoutError,
)

__all__ = [
    "ConciergeException",
    "DatabaseConnectionError",
    "HttpServerError",
    "ShutdownError",
    "ShutdownTimeoutError",
]
