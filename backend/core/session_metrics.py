"""
Session timing and load metrics.

- Time under tension from reps and a 4-phase tempo code
- Estimated session duration (work + rest for every set)
- Session total load and summary statistics
"""

import math
from typing import Optional, Sequence

from backend.core.volume_service import calculate_set_volume, resolve_load_unit
from domain.models.analysis import SessionStats
from domain.models.exercise_set import DEFAULT_TEMPO, ExerciseSet
from domain.models.load import LoadUnit
from domain.models.program import ExerciseInstance


def _phase_seconds(char: str) -> int:
    return int(char) if "0" <= char <= "9" else 0


def calculate_time_under_tension(reps: Optional[int] = 0, tempo: Optional[str] = DEFAULT_TEMPO) -> int:
    """
    Calculate time under tension for a set.

    Tempo is read as eccentric, bottom pause, concentric, top pause seconds.
    "X" (explosive) counts as 0 seconds. Short codes are right-padded with
    zeros, long codes are truncated, and any other non-digit counts as 0.

    Examples:
        >>> calculate_time_under_tension(10, "2010")
        30
        >>> calculate_time_under_tension(5, "21")
        15

    Args:
        reps: Number of repetitions
        tempo: Tempo code, e.g. "3010"

    Returns:
        Total seconds under tension (0 when reps <= 0)
    """
    if not reps or reps <= 0:
        return 0
    if tempo is None:
        tempo = DEFAULT_TEMPO

    normalized = tempo.replace("X", "0").replace("x", "0")
    padded = normalized.ljust(4, "0")[:4]
    seconds_per_rep = sum(_phase_seconds(char) for char in padded)

    return reps * seconds_per_rep


def calculate_set_duration(exercise_set: ExerciseSet) -> float:
    """
    Work time of one set in seconds, excluding rest.

    Sets with a duration (cardio, carries) use it directly; rep-based sets
    use time under tension.
    """
    duration = exercise_set.duration_seconds
    if duration is not None:
        return duration
    return calculate_time_under_tension(exercise_set.reps or 0, exercise_set.tempo or DEFAULT_TEMPO)


def calculate_session_duration(exercises: Sequence[ExerciseInstance]) -> float:
    """
    Estimate total session duration from planned sets.

    Each set contributes its work time plus its own rest, including the rest
    after the final set.

    Returns:
        Total duration in seconds
    """
    total = 0.0
    for exercise in exercises:
        for exercise_set in exercise.planned_sets:
            total += calculate_set_duration(exercise_set) + exercise_set.rest_seconds
    return total


def format_session_duration(duration_seconds: float) -> str:
    """Format a duration: seconds under a minute, else minutes rounded up."""
    if duration_seconds < 60:
        return f"{duration_seconds:g}s"
    return f"{math.ceil(duration_seconds / 60)} minutes"


def calculate_session_total_load(
    exercises: Sequence[ExerciseInstance],
    preferred_unit: LoadUnit = LoadUnit.LBS,
) -> float:
    """Total planned volume of a session, rounded to 2 decimals."""
    unit = resolve_load_unit(preferred_unit)
    total = sum(
        (
            calculate_set_volume(exercise_set, unit)
            for exercise in exercises
            for exercise_set in exercise.planned_sets
        ),
        0.0,
    )
    return round(total, 2)


def calculate_session_stats(
    exercises: Sequence[ExerciseInstance],
    preferred_unit: LoadUnit = LoadUnit.LBS,
) -> SessionStats:
    duration = calculate_session_duration(exercises)
    return SessionStats(
        estimated_duration=format_session_duration(duration),
        total_exercises=len(exercises),
        total_sets=sum(len(ex.planned_sets) for ex in exercises),
        total_reps=sum(s.reps or 0 for ex in exercises for s in ex.planned_sets),
        total_load=calculate_session_total_load(exercises, preferred_unit),
        duration_seconds=duration,
    )
