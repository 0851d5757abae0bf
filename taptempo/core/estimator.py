"""
BPM estimation from the span of a tap window.

The tempo is derived from the mean interval between the oldest and newest
taps. Everything stays in floating point; rounding is left to the display.
"""

import math


def compute_bpm(newest: float, oldest: float, interval_count: int) -> float:
    """
    Compute a tempo from the span of a set of taps.

    Args:
        newest: Timestamp of the most recent tap (seconds)
        oldest: Timestamp of the oldest tap (seconds)
        interval_count: Number of intervals between the two, i.e. taps - 1.
            Zero is treated as one.

    Returns:
        Tempo in beats per minute. Infinite when no time elapsed.
    """
    if interval_count == 0:
        interval_count = 1

    elapsed = newest - oldest
    if elapsed == 0:
        return math.inf

    mean_interval = elapsed / interval_count
    return 60.0 / mean_interval


def format_bpm(bpm: float, precision: int) -> str:
    """Render a tempo with a fixed number of decimals and digit grouping."""
    if not math.isfinite(bpm):
        return "∞"
    return f"{bpm:,.{precision}f}"
