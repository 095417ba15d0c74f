"""
API routes.
"""

from concierge.presentation.api.routes import health

__all__ = ["health"]
