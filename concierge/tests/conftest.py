"""
Test fixtures and configuration.
"""

from typing import List

import pytest

from concierge.config.settings import Settings
from concierge.lifecycle.signals import ShutdownSignal
from helpers.fakes import FakeClock, make_settings


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Provide test settings with an assets directory under tmp_path."""
    return make_settings(ASSETS_BUILD_DIR=str(tmp_path))


@pytest.fixture
def events() -> List[str]:
    """Provide a fresh ordered event log."""
    return []


@pytest.fixture
def clock() -> FakeClock:
    """Provide a manually advanced clock."""
    return FakeClock()


@pytest.fixture
def shutdown_signal(clock) -> ShutdownSignal:
    """Provide a manual shutdown trigger sharing the fake clock."""
    return ShutdownSignal(clock=clock)
