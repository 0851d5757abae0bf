"""Time sources used to timestamp taps.

The engine never calls a global "now" function: a clock is handed to the
session so that tests can drive elapsed time deterministically.
"""

import time
from typing import Protocol


class Clock(Protocol):
    """Anything able to return the current time in seconds."""

    def now(self) -> float: ...


class MonotonicClock:
    """Monotonic clock, immune to wall-clock adjustments (DST, NTP, etc)."""

    def now(self) -> float:
        """
        Current time in seconds.

        Returns:
            Seconds from an arbitrary but fixed origin
        """
        return time.monotonic()
