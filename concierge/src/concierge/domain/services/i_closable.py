"""Closable resource interface."""

from abc import ABC, abstractmethod


class IClosable(ABC):
    """Resource holding a connection that must be released explicitly."""

    @abstractmethod
    async def close(self) -> None:
        """
        Release the underlying connection.

        Raises:
            Exception: Any error from the driver; callers treat it as fatal
                during shutdown.
        """
