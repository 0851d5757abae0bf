"""
Sample window of recent tap timestamps.

The window keeps the most recent taps since the last reset, oldest first,
and never grows beyond the configured sample size.
"""

from collections import deque
from typing import Iterator

from loguru import logger

from .errors import EmptyWindowError


def should_reset(last_timestamp: float, new_timestamp: float, reset_time: float) -> bool:
    """
    Decide whether a new tap starts a fresh measurement.

    Args:
        last_timestamp: Newest timestamp already in the window (seconds)
        new_timestamp: Timestamp of the incoming tap (seconds)
        reset_time: Maximum allowed gap between taps (seconds)

    Returns:
        True if the gap strictly exceeds reset_time
    """
    return new_timestamp - last_timestamp > reset_time


class SampleWindow:
    """Bounded, ordered buffer of tap timestamps."""

    def __init__(self, sample_size: int, reset_time: float):
        if sample_size < 1:
            raise ValueError(f"sample_size must be >= 1, got {sample_size}")
        self.sample_size = sample_size
        self.reset_time = reset_time
        self._taps: deque[float] = deque()

    def record_tap(self, timestamp: float) -> bool:
        """
        Add a tap, clearing stale history and evicting the oldest overflow.

        Args:
            timestamp: Time of the tap in seconds

        Returns:
            True if the window was cleared before the tap was added
        """
        reset = bool(self._taps) and should_reset(
            self._taps[-1], timestamp, self.reset_time
        )
        if reset:
            logger.debug(
                f"Gap of {timestamp - self._taps[-1]:.3f}s exceeds {self.reset_time}s, "
                f"dropping {len(self._taps)} taps"
            )
            self._taps.clear()

        self._taps.append(timestamp)

        while len(self._taps) > self.sample_size:
            self._taps.popleft()

        return reset

    def clear(self) -> None:
        """Drop every recorded tap."""
        self._taps.clear()

    def is_empty(self) -> bool:
        return not self._taps

    def size(self) -> int:
        return len(self._taps)

    def oldest(self) -> float:
        if not self._taps:
            raise EmptyWindowError("window is empty")
        return self._taps[0]

    def newest(self) -> float:
        if not self._taps:
            raise EmptyWindowError("window is empty")
        return self._taps[-1]

    def __len__(self) -> int:
        return len(self._taps)

    def __iter__(self) -> Iterator[float]:
        return iter(self._taps)

    def __repr__(self) -> str:
        return f"SampleWindow(sample_size={self.sample_size}, taps={list(self._taps)})"
