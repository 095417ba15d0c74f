"""
Domain value objects.
"""

from concierge.domain.value_objects.shutdown_deadline import ShutdownDeadline

__all__ = ["ShutdownDeadline"]
