"""
Tap session state machine.

A session turns keystrokes into tempo estimates: Enter records a tap, 'q'
quits, and every other character is ignored.
"""

from enum import Enum

from loguru import logger
from pydantic import BaseModel, Field

from .clock import Clock, MonotonicClock
from .config import TapTempoConfig
from .estimator import compute_bpm
from .window import SampleWindow

TAP_KEY = "\n"
QUIT_KEY = "q"


class TapAction(str, Enum):
    """What a single keystroke asks the session to do."""

    TAP = "tap"
    QUIT = "quit"
    IGNORE = "ignore"


class TapState(str, Enum):
    """Where the session stands in a measurement."""

    EMPTY = "empty"
    COLLECTING = "collecting"
    ESTIMATING = "estimating"


class TapResult(BaseModel):
    """Outcome of recording one tap."""

    timestamp: float = Field(description="Clock time of the tap in seconds")
    sample_count: int = Field(ge=1, description="Taps in the window after recording")
    reset: bool = Field(default=False, description="Whether stale history was dropped")
    bpm: float | None = Field(
        default=None, description="Estimated tempo, None until two taps are known"
    )


def classify_key(char: str) -> TapAction:
    """Map an input character to the action it triggers."""
    if char == QUIT_KEY:
        return TapAction.QUIT
    if char == TAP_KEY:
        return TapAction.TAP
    return TapAction.IGNORE


class TapSession:
    """
    Drives the sample window and estimator from taps.

    Single-threaded: taps must be fed sequentially by one caller.
    """

    def __init__(self, config: TapTempoConfig | None = None, clock: Clock | None = None):
        """
        Initialize a tap session.

        Args:
            config: Engine settings (uses defaults if None)
            clock: Time source for taps (monotonic clock if None)
        """
        self.config = config or TapTempoConfig()
        self.clock = clock or MonotonicClock()
        self.window = SampleWindow(
            sample_size=self.config.sample_size,
            reset_time=self.config.reset_time,
        )

    @property
    def state(self) -> TapState:
        size = self.window.size()
        if size == 0:
            return TapState.EMPTY
        if size == 1:
            return TapState.COLLECTING
        return TapState.ESTIMATING

    def tap(self) -> TapResult:
        """
        Record a tap at the current clock time.

        Returns:
            TapResult with the estimate when the window holds two taps or more
        """
        timestamp = self.clock.now()
        reset = self.window.record_tap(timestamp)

        result = TapResult(
            timestamp=timestamp,
            sample_count=self.window.size(),
            reset=reset,
        )
        if result.sample_count >= 2:
            result.bpm = compute_bpm(
                self.window.newest(),
                self.window.oldest(),
                result.sample_count - 1,
            )

        logger.debug(
            f"Tap at {timestamp:.3f}s: {result.sample_count} samples, bpm={result.bpm}"
        )
        return result
