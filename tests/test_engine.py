"""
Tests for the tempo estimation engine: reset policy, window and formula.
"""

import math

import pytest
from pydantic import ValidationError

from taptempo.core.config import TapTempoConfig
from taptempo.core.errors import EmptyWindowError
from taptempo.core.estimator import compute_bpm, format_bpm
from taptempo.core.window import SampleWindow, should_reset

from conftest import EPOCH


class TestResetPolicy:
    """Test the stale gap detection."""

    def test_short_gap_keeps_history(self):
        """Test a gap below reset_time keeps history."""
        assert should_reset(EPOCH, EPOCH + 2, 5) is False

    def test_long_gap_resets(self):
        """Test a gap above reset_time resets."""
        assert should_reset(EPOCH, EPOCH + 7, 5) is True

    def test_exact_boundary_does_not_reset(self):
        """A gap of exactly reset_time is still a continuation."""
        assert should_reset(EPOCH, EPOCH + 5.0, 5) is False

    def test_just_over_boundary_resets(self):
        """Test a gap just over reset_time resets."""
        assert should_reset(EPOCH, EPOCH + 5.001, 5) is True


class TestSampleWindow:
    """Test SampleWindow bookkeeping."""

    def test_starts_empty(self):
        """Test a new window holds no taps."""
        window = SampleWindow(sample_size=5, reset_time=5)
        assert window.is_empty()
        assert window.size() == 0
        assert len(window) == 0

    def test_empty_accessors_raise(self):
        """Test oldest and newest raise on an empty window."""
        window = SampleWindow(sample_size=5, reset_time=5)
        with pytest.raises(EmptyWindowError):
            window.oldest()
        with pytest.raises(IndexError):
            window.newest()

    def test_single_tap(self):
        """Test one tap is both oldest and newest."""
        window = SampleWindow(sample_size=5, reset_time=5)
        window.record_tap(EPOCH)
        assert window.oldest() == window.newest() == EPOCH

    def test_eviction_keeps_most_recent(self):
        """Taps beyond sample_size evict the oldest first."""
        window = SampleWindow(sample_size=3, reset_time=5)
        for i in range(6):
            window.record_tap(EPOCH + i)

        assert window.size() == 3
        assert list(window) == [EPOCH + 3, EPOCH + 4, EPOCH + 5]
        assert window.oldest() == EPOCH + 3
        assert window.newest() == EPOCH + 5

    def test_stale_gap_clears_history(self):
        """Test a stale gap drops earlier taps."""
        window = SampleWindow(sample_size=5, reset_time=5)
        assert window.record_tap(EPOCH) is False
        assert window.record_tap(EPOCH + 1) is False
        assert window.record_tap(EPOCH + 10) is True

        assert window.size() == 1
        assert window.oldest() == EPOCH + 10

    def test_boundary_gap_keeps_history(self):
        """Test a gap of exactly reset_time keeps taps."""
        window = SampleWindow(sample_size=5, reset_time=5)
        window.record_tap(EPOCH)
        window.record_tap(EPOCH + 5)
        assert window.size() == 2

    def test_sample_size_of_one(self):
        """Test a window of one keeps only the latest tap."""
        window = SampleWindow(sample_size=1, reset_time=5)
        window.record_tap(EPOCH)
        window.record_tap(EPOCH + 1)
        assert list(window) == [EPOCH + 1]

    def test_clear(self):
        """Test clear empties the window."""
        window = SampleWindow(sample_size=5, reset_time=5)
        window.record_tap(EPOCH)
        window.clear()
        assert window.is_empty()

    def test_invalid_sample_size(self):
        """Test a sample size below one is rejected."""
        with pytest.raises(ValueError):
            SampleWindow(sample_size=0, reset_time=5)


class TestComputeBpm:
    """Test the BPM formula."""

    def test_mean_interval(self):
        """Five intervals over two seconds is 150 bpm."""
        assert compute_bpm(EPOCH + 2, EPOCH, 5) == pytest.approx(150.0, abs=0.001)

    def test_single_interval(self):
        """Test one half-second interval is 120 bpm."""
        assert compute_bpm(EPOCH + 0.5, EPOCH, 1) == pytest.approx(120.0)

    def test_zero_intervals_treated_as_one(self):
        """Test zero intervals is coerced to one."""
        assert compute_bpm(EPOCH + 2, EPOCH, 0) == compute_bpm(EPOCH + 2, EPOCH, 1)

    def test_no_elapsed_time_is_infinite(self):
        """Test zero elapsed time gives an infinite tempo."""
        result = compute_bpm(EPOCH, EPOCH, 3)
        assert math.isinf(result)

    def test_no_truncation_of_sub_millisecond_intervals(self):
        """Intervals are not rounded to whole milliseconds."""
        result = compute_bpm(EPOCH + 1.0, EPOCH, 3)
        assert result == pytest.approx(180.0)


class TestFormatBpm:
    """Test tempo display formatting."""

    def test_zero_precision_rounds(self):
        """Test zero precision rounds to an integer."""
        assert format_bpm(29.6, 0) == "30"

    def test_fixed_decimals(self):
        """Test trailing zeros are kept."""
        assert format_bpm(120.0, 2) == "120.00"

    def test_grouping(self):
        """Test thousands are grouped."""
        assert format_bpm(1234.5, 1) == "1,234.5"

    def test_infinite(self):
        """Test an infinite tempo renders as a symbol."""
        assert format_bpm(math.inf, 0) == "∞"


class TestTapTempoConfig:
    """Test configuration clamping."""

    def test_defaults(self):
        """Test default values are applied."""
        config = TapTempoConfig()
        assert config.precision == 0
        assert config.reset_time == 5
        assert config.sample_size == 5

    @pytest.mark.parametrize("value,expected", [(-1, 0), (3, 3), (9, 5)])
    def test_precision_clamped(self, value, expected):
        """Test precision is clamped to 0..5."""
        assert TapTempoConfig(precision=value).precision == expected

    def test_minimums(self):
        """Test reset_time and sample_size are clamped to 1."""
        config = TapTempoConfig(reset_time=0, sample_size=-3)
        assert config.reset_time == 1
        assert config.sample_size == 1

    def test_frozen(self):
        """Test the configuration cannot be modified."""
        config = TapTempoConfig()
        with pytest.raises(ValidationError):
            config.precision = 2
