"""
Unit tests for session timing and load metrics.

Tests cover:
- Time under tension parsing (explosive phases, padding, truncation)
- Session duration (rest after the last set, duration-based sets)
- Session stats formatting
"""
import pytest

from backend.core.session_metrics import (
    calculate_session_duration,
    calculate_session_stats,
    calculate_session_total_load,
    calculate_time_under_tension,
    format_session_duration,
)
from domain.models import ExerciseSet, LoadUnit
from tests.factories import make_instance, make_set


# =============================================================================
# Time Under Tension
# =============================================================================


@pytest.mark.unit
class TestTimeUnderTension:
    """Tests for calculate_time_under_tension."""

    def test_standard_tempo(self):
        """2010 = 3 seconds per rep."""
        assert calculate_time_under_tension(10, "2010") == 30

    def test_explosive_phase_counts_as_zero(self):
        assert calculate_time_under_tension(10, "X010") == 10

    def test_lowercase_explosive_phase(self):
        assert calculate_time_under_tension(10, "3x1x") == 40

    def test_zero_reps(self):
        assert calculate_time_under_tension(0, "2010") == 0

    def test_negative_reps(self):
        assert calculate_time_under_tension(-3, "2010") == 0

    def test_short_tempo_is_padded(self):
        """'21' pads to '2100'."""
        assert calculate_time_under_tension(5, "21") == 15

    def test_long_tempo_is_truncated(self):
        """Only the first four phases count."""
        assert calculate_time_under_tension(2, "311199") == 12

    def test_non_digit_phase_counts_as_zero(self):
        assert calculate_time_under_tension(4, "2?1-") == 12

    def test_default_tempo(self):
        assert calculate_time_under_tension(10) == 30

    def test_none_tempo_uses_default(self):
        assert calculate_time_under_tension(10, None) == 30

    def test_empty_tempo(self):
        assert calculate_time_under_tension(10, "") == 0


# =============================================================================
# Session Duration
# =============================================================================


@pytest.mark.unit
class TestSessionDuration:
    """Tests for calculate_session_duration."""

    def test_includes_rest_after_final_set(self):
        exercise = make_instance(
            planned=[
                make_set(10, "100", tempo="2010", rest_seconds=60),
                make_set(10, "100", tempo="2010", rest_seconds=60),
            ]
        )
        # (30 + 60) * 2
        assert calculate_session_duration([exercise]) == 180

    def test_missing_tempo_uses_default(self):
        exercise = make_instance(planned=[make_set(5, "100", rest_seconds=0)])
        assert calculate_session_duration([exercise]) == 15

    def test_duration_in_minutes(self):
        row = make_instance(planned=[ExerciseSet(duration=5, rest_seconds=30)])
        assert calculate_session_duration([row]) == 330

    def test_duration_in_seconds(self):
        plank = make_instance(
            planned=[ExerciseSet(duration=45, durationUnit="seconds", restSec=15)]
        )
        assert calculate_session_duration([plank]) == 60

    def test_empty_session(self):
        assert calculate_session_duration([]) == 0

    def test_exercise_without_sets(self):
        assert calculate_session_duration([make_instance(planned=[])]) == 0


# =============================================================================
# Formatting and Stats
# =============================================================================


@pytest.mark.unit
class TestSessionStats:
    """Tests for session stats and formatting."""

    def test_format_under_a_minute(self):
        assert format_session_duration(45) == "45s"

    def test_format_rounds_minutes_up(self):
        assert format_session_duration(61) == "2 minutes"

    def test_format_exact_minutes(self):
        assert format_session_duration(120) == "2 minutes"

    def test_total_load_converts_units(self):
        exercise = make_instance(planned=[(10, "100", "kg")])
        assert calculate_session_total_load([exercise], LoadUnit.LBS) == 2204.62

    def test_total_load_ignores_bodyweight(self):
        exercise = make_instance(planned=[(10, "BW"), (10, "50")])
        assert calculate_session_total_load([exercise]) == 500.0

    def test_stats(self):
        squat = make_instance(1, "Squat", planned=[(5, "100"), (5, "100")])
        pullup = make_instance(2, "Pull-up", planned=[(8, "BW")])

        stats = calculate_session_stats([squat, pullup], LoadUnit.LBS)

        assert stats.total_exercises == 2
        assert stats.total_sets == 3
        assert stats.total_reps == 18
        assert stats.total_load == 1000.0
        assert stats.duration_seconds == 54
        assert stats.estimated_duration == "54s"
