"""
API middleware for Concierge.
"""

from concierge.presentation.api.middleware.error_handler import (
    concierge_exception_handler,
)
from concierge.presentation.api.middleware.metrics_middleware import (
    MetricsMiddleware,
)
from concierge.presentation.api.middleware.request_id_middleware import (
    RequestIDMiddleware,
)

__all__ = [
    "concierge_exception_handler",
    "MetricsMiddleware",
    "RequestIDMiddleware",
]
