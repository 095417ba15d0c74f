"""
ShutdownDeadline value object - Time budget for a shutdown step.
"""

import time
from dataclasses import dataclass, field
from typing import Callable


@dataclass(frozen=True)
class ShutdownDeadline:
    """
    Value object representing a deadline measured on a monotonic clock.

    Business rules:
    - Timeout must be positive
    - Remaining time never goes below zero
    """

    started_at: float
    timeout: float
    clock: Callable[[], float] = field(
        default=time.monotonic, compare=False, repr=False
    )

    def __post_init__(self):
        """Validate deadline on creation."""
        if self.timeout <= 0:
            raise ValueError("Timeout must be positive")

    @property
    def expires_at(self) -> float:
        """Clock reading at which the deadline elapses."""
        return self.started_at + self.timeout

    def remaining(self) -> float:
        """Seconds left before the deadline (never negative)."""
        return max(0.0, self.expires_at - self.clock())

    def expired(self) -> bool:
        """Check if the deadline has elapsed."""
        return self.remaining() == 0.0
