"""Runtime configuration for a tap tempo session.

Out-of-range values are clamped into their allowed range rather than
rejected, so any integer the user passes on the command line is usable.
"""

from pydantic import BaseModel, Field, field_validator

PRECISION_MIN = 0
PRECISION_MAX = 5
DEFAULT_PRECISION = 0
DEFAULT_RESET_TIME = 5
DEFAULT_SAMPLE_SIZE = 5


class TapTempoConfig(BaseModel):
    """Immutable settings for the estimation engine and its display."""

    precision: int = Field(
        default=DEFAULT_PRECISION,
        description="Decimal digits shown in the tempo display",
    )
    reset_time: int = Field(
        default=DEFAULT_RESET_TIME,
        description="Maximum gap in seconds between taps before the history is cleared",
    )
    sample_size: int = Field(
        default=DEFAULT_SAMPLE_SIZE,
        description="Maximum number of taps kept to compute the tempo",
    )

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("precision")
    @classmethod
    def clamp_precision(cls, value: int) -> int:
        return max(PRECISION_MIN, min(PRECISION_MAX, value))

    @field_validator("reset_time", "sample_size")
    @classmethod
    def clamp_to_one(cls, value: int) -> int:
        return max(1, value)
