"""Core tempo estimation functionality."""

from .clock import Clock, MonotonicClock
from .config import TapTempoConfig
from .errors import ArgumentError, EmptyWindowError, TapTempoError
from .estimator import compute_bpm, format_bpm
from .session import TapAction, TapResult, TapSession, TapState, classify_key
from .window import SampleWindow, should_reset

__all__ = [
    # Clock
    "Clock",
    "MonotonicClock",
    # Configuration
    "TapTempoConfig",
    # Sample Window
    "SampleWindow",
    "EmptyWindowError",
    "should_reset",
    # Errors
    "TapTempoError",
    "ArgumentError",
    # Estimation
    "compute_bpm",
    "format_bpm",
    # Session
    "TapAction",
    "TapResult",
    "TapSession",
    "TapState",
    "classify_key",
]
