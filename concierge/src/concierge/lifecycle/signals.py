"""
Shutdown signal sources.

ShutdownSignal is a one-shot trigger the coordinator waits on. Tests
trigger it directly; InterruptSignal wires it to SIGINT.
"""

import asyncio
import signal
import time
from typing import Callable, Optional

from concierge.infrastructure.monitoring import get_logger

logger = get_logger(__name__)


class ShutdownSignal:
    """
    One-shot shutdown trigger.

    Only the first trigger counts; its reason and clock reading are kept
    so the shutdown deadline can be measured from the moment of receipt.

    Attributes:
        reason: Why shutdown was requested (signal name, manual, ...)
        received_at: Clock reading of the first trigger
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._event = asyncio.Event()
        self.reason: Optional[str] = None
        self.received_at: Optional[float] = None

    def install(self) -> None:
        """Hook the trigger up to its source (no-op for manual signals)."""

    def uninstall(self) -> None:
        """Detach the trigger from its source (no-op for manual signals)."""

    def trigger(self, reason: str = "manual") -> None:
        """
        Request shutdown.

        Args:
            reason: Why shutdown was requested
        """
        if self._event.is_set():
            return

        self.reason = reason
        self.received_at = self._clock()
        self._event.set()

    def is_set(self) -> bool:
        """Check if shutdown has been requested."""
        return self._event.is_set()

    async def wait(self) -> float:
        """
        Block until shutdown is requested.

        Returns:
            Clock reading at which the trigger fired
        """
        await self._event.wait()
        return self.received_at


class InterruptSignal(ShutdownSignal):
    """Shutdown trigger fired by SIGINT on the running event loop."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        super().__init__(clock=clock)
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    def install(self) -> None:
        """Register the SIGINT handler on the running loop."""
        if self._loop is not None:
            return

        self._loop = asyncio.get_running_loop()
        self._loop.add_signal_handler(signal.SIGINT, self._on_interrupt)
        logger.info("SIGINT handler registered for graceful shutdown")

    def uninstall(self) -> None:
        """Remove the SIGINT handler."""
        if self._loop is None:
            return

        self._loop.remove_signal_handler(signal.SIGINT)
        self._loop = None

    def _on_interrupt(self) -> None:
        logger.info("Received SIGINT, initiating graceful shutdown...")
        self.trigger(signal.SIGINT.name)
