"""
Lifecycle exceptions raised while opening, serving and closing resources.
"""

from concierge.domain.exceptions.base import ConciergeException


class DatabaseConnectionError(ConciergeException):
    """Raised when the database cannot be reached."""

    def __init__(self, reason: str):
        message = f"could not connect to db: {reason}"
        super().__init__(message, code="DATABASE_UNAVAILABLE")


class HttpServerError(ConciergeException):
    """Raised when the HTTP listener fails to bind or stops abnormally."""

    def __init__(self, address: str, reason: str):
        self.address = address
        message = f"HTTP server on {address} failed: {reason}"
        super().__init__(message, code="HTTP_SERVER_ERROR")


class ShutdownError(ConciergeException):
    """
    Raised when a shutdown step fails.

    The step that failed is kept on ``step`` ("cache", "database" or
    "http"); no later step has been attempted.
    """

    def __init__(self, step: str, reason: str, code: str = "SHUTDOWN_FAILED"):
        self.step = step
        message = f"shutdown step '{step}' failed: {reason}"
        super().__init__(message, code=code)


class ShutdownTimeoutError(ShutdownError):
    """Raised when a shutdown step does not finish before its deadline."""

    def __init__(self, step: str, timeout: float):
        self.timeout = timeout
        super().__init__(
            step,
            f"deadline of {timeout:.1f}s exceeded",
            code="SHUTDOWN_TIMEOUT",
        )
