"""
Unit tests for shutdown signal sources.

Usage:
    pytest concierge/tests/unit/lifecycle
"""

import asyncio
import os
import signal

from concierge.lifecycle.signals import InterruptSignal, ShutdownSignal
from helpers.fakes import FakeClock


class TestShutdownSignal:
    """Unit tests for the manual shutdown trigger."""

    def test_initial_state(self):
        """Signal starts unset with no reason."""
        sig = ShutdownSignal()

        assert sig.is_set() is False
        assert sig.reason is None
        assert sig.received_at is None

    def test_trigger_records_reason_and_time(self):
        """Trigger keeps the reason and the clock reading."""
        clock = FakeClock(now=42.0)
        sig = ShutdownSignal(clock=clock)

        sig.trigger("maintenance")

        assert sig.is_set() is True
        assert sig.reason == "maintenance"
        assert sig.received_at == 42.0

    def test_only_first_trigger_counts(self):
        """Later triggers do not move the receipt time."""
        clock = FakeClock(now=10.0)
        sig = ShutdownSignal(clock=clock)

        sig.trigger("first")
        clock.advance(3.0)
        sig.trigger("second")

        assert sig.reason == "first"
        assert sig.received_at == 10.0

    async def test_wait_returns_receipt_time(self):
        """wait() unblocks on trigger and returns the receipt time."""
        clock = FakeClock(now=7.5)
        sig = ShutdownSignal(clock=clock)

        waiter = asyncio.create_task(sig.wait())
        await asyncio.sleep(0.05)
        assert not waiter.done()

        sig.trigger()
        received_at = await asyncio.wait_for(waiter, timeout=1.0)

        assert received_at == 7.5


class TestInterruptSignal:
    """Unit tests for the SIGINT-backed trigger."""

    async def test_sigint_triggers_shutdown(self):
        """Delivering SIGINT fires the trigger."""
        sig = InterruptSignal()
        sig.install()

        try:
            os.kill(os.getpid(), signal.SIGINT)
            await asyncio.wait_for(sig.wait(), timeout=1.0)
        finally:
            sig.uninstall()

        assert sig.reason == "SIGINT"

    async def test_install_is_idempotent(self):
        """Installing twice keeps a single handler."""
        sig = InterruptSignal()

        sig.install()
        sig.install()
        sig.uninstall()
        sig.uninstall()

        assert sig.is_set() is False
