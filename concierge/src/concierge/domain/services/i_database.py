"""
Database handle interface.

Defines the lifecycle operations the coordinator needs from the
relational store.
"""

from abc import abstractmethod

from concierge.domain.services.i_closable import IClosable


class IDatabase(IClosable):
    """Abstract interface for an open connection pool to a relational store."""

    @abstractmethod
    async def open_with_config(self, settings) -> None:
        """
        Open the connection pool and verify connectivity.

        Args:
            settings: Application settings

        Raises:
            DatabaseConnectionError: If the database cannot be reached
        """

    @abstractmethod
    async def health_check(self) -> bool:
        """
        Check database connectivity.

        Returns:
            True if connection is healthy, False otherwise
        """
