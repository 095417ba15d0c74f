"""
Infrastructure persistence package.
"""

from concierge.infrastructure.persistence.database import Database

__all__ = ["Database"]
