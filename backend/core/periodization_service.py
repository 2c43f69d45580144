"""
Periodization targets and progressed weeks.

This module turns a program's declared periodization into:
- A target weekly volume curve (percent of week 1)
- Progressed copies of a week-1 template for every week of the program

Both are pure functions of (periodization type, program length, settings).
"""

import logging
import math
from typing import Dict, List, Optional, Sequence

from application.exceptions import InvalidProgramLengthError
from domain.models.exercise_set import ExerciseSet
from domain.models.load import NumericLoad
from domain.models.program import (
    ExerciseInstance,
    PeriodizationType,
    ProgressionSettings,
)

logger = logging.getLogger(__name__)


BASELINE_PCT = 100.0

# Undulating curve: heavy start, alternating light/moderate, deload finish.
# These values are a fixed product table, not derived from settings.
UNDULATING_SHORT_PATTERNS = {
    1: [100.0],
    2: [100.0, 70.0],
    3: [100.0, 70.0, 50.0],
    4: [100.0, 70.0, 90.0, 50.0],
}
UNDULATING_INTERIOR_CYCLE = (70.0, 90.0)
UNDULATING_FINAL_PCT = 50.0


def _round_half_up(value: float, digits: int = 0) -> float:
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def _format_load(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")


def _validate_total_weeks(total_weeks: int) -> None:
    if isinstance(total_weeks, bool) or not isinstance(total_weeks, int) or total_weeks < 1:
        raise InvalidProgramLengthError(total_weeks)


def generate_undulating_pattern(total_weeks: int) -> List[float]:
    """
    Generate the canonical undulating weekly-percentage sequence.

    Week 1 is 100, interior weeks alternate 70/90 starting at 70, and the
    final week is always 50.

    Examples:
        >>> generate_undulating_pattern(4)
        [100.0, 70.0, 90.0, 50.0]
        >>> generate_undulating_pattern(6)
        [100.0, 70.0, 90.0, 70.0, 90.0, 50.0]

    Raises:
        InvalidProgramLengthError: total_weeks < 1
    """
    _validate_total_weeks(total_weeks)
    if total_weeks in UNDULATING_SHORT_PATTERNS:
        return list(UNDULATING_SHORT_PATTERNS[total_weeks])

    interior = [
        UNDULATING_INTERIOR_CYCLE[i % len(UNDULATING_INTERIOR_CYCLE)]
        for i in range(total_weeks - 2)
    ]
    return [BASELINE_PCT, *interior, UNDULATING_FINAL_PCT]


def generate_linear_pattern(
    total_weeks: int,
    settings: Optional[ProgressionSettings] = None,
) -> List[float]:
    """
    Generate linear targets from the configured increments.

    Reps compound by ``volume_increment_pct`` per week and load grows by
    ``load_increment_pct`` of the week-1 load per week, so volume follows:

        target[w] = 100 * (1 + v/100)^(w-1) * (1 + l*(w-1)/100)

    With no increments configured every week stays at 100.
    """
    _validate_total_weeks(total_weeks)
    settings = settings or ProgressionSettings()
    volume_step = 1 + settings.volume_increment_pct / 100

    targets = []
    for week_offset in range(total_weeks):
        load_factor = 1 + settings.load_increment_pct * week_offset / 100
        targets.append(BASELINE_PCT * volume_step ** week_offset * load_factor)
    return targets


def generate_weekly_targets(
    periodization_type: PeriodizationType,
    total_weeks: int,
    settings: Optional[ProgressionSettings] = None,
) -> List[float]:
    """
    Generate the canonical target curve for a periodization type.

    Args:
        periodization_type: None, Linear or Undulating
        total_weeks: Program length (>= 1)
        settings: Linear increments (ignored by the other types)

    Returns:
        One target percentage per week, week 1 = 100

    Raises:
        InvalidProgramLengthError: total_weeks < 1
    """
    _validate_total_weeks(total_weeks)
    periodization_type = PeriodizationType(periodization_type)

    if periodization_type == PeriodizationType.LINEAR:
        return generate_linear_pattern(total_weeks, settings)
    if periodization_type == PeriodizationType.UNDULATING:
        return generate_undulating_pattern(total_weeks)
    return [BASELINE_PCT] * total_weeks


def resolve_weekly_targets(
    periodization_type: PeriodizationType,
    total_weeks: int,
    settings: Optional[ProgressionSettings] = None,
) -> List[float]:
    """
    Weekly targets, preferring manually entered percentages.

    Manual ``weekly_volume_percentages`` are padded with 100 or truncated to
    the program length. Without them the canonical curve is generated.
    """
    _validate_total_weeks(total_weeks)
    manual = list(settings.weekly_volume_percentages) if settings else []
    if not manual:
        return generate_weekly_targets(periodization_type, total_weeks, settings)

    logger.debug(f"Using {len(manual)} manual weekly percentages for {total_weeks} weeks")
    padded = manual + [BASELINE_PCT] * (total_weeks - len(manual))
    return [float(pct) for pct in padded[:total_weeks]]


# =============================================================================
# Progressed Weeks
# =============================================================================


def _progress_linear_set(
    exercise_set: ExerciseSet,
    set_position: int,
    sibling_sets: Sequence[ExerciseSet],
    week: int,
    settings: ProgressionSettings,
) -> Dict[str, object]:
    update: Dict[str, object] = {}

    load = exercise_set.parsed_load
    if isinstance(load, NumericLoad):
        factor = 1 + settings.load_increment_pct * (week - 1) / 100
        update["load"] = _format_load(_round_half_up(load.value * factor, 2))

    if exercise_set.reps is not None:
        base_total = sum(s.reps or 0 for s in sibling_sets)
        progressed_total = int(_round_half_up(
            base_total * (1 + settings.volume_increment_pct / 100) ** (week - 1)
        ))
        per_set, remainder = divmod(progressed_total, len(sibling_sets))
        update["reps"] = per_set + (1 if set_position < remainder else 0)

    return update


def _progress_undulating_set(exercise_set: ExerciseSet, week_pct: float) -> Dict[str, object]:
    if exercise_set.reps is None:
        return {}
    return {"reps": max(1, int(_round_half_up(exercise_set.reps * week_pct / 100)))}


def _progress_sets(
    sets: Sequence[ExerciseSet],
    week: int,
    periodization_type: PeriodizationType,
    settings: ProgressionSettings,
    week_pct: float,
) -> List[ExerciseSet]:
    progressed = []
    for position, exercise_set in enumerate(sets):
        if periodization_type == PeriodizationType.LINEAR:
            update = _progress_linear_set(exercise_set, position, sets, week, settings)
        elif periodization_type == PeriodizationType.UNDULATING:
            update = _progress_undulating_set(exercise_set, week_pct)
        else:
            update = {}

        if exercise_set.sub_sets:
            update["sub_sets"] = _progress_sets(
                exercise_set.sub_sets, week, periodization_type, settings, week_pct
            )
        progressed.append(exercise_set.model_copy(update=update))
    return progressed


def generate_progressed_weeks(
    base_exercises: Sequence[ExerciseInstance],
    total_weeks: int,
    periodization_type: PeriodizationType = PeriodizationType.NONE,
    settings: Optional[ProgressionSettings] = None,
) -> Dict[int, List[ExerciseInstance]]:
    """
    Expand a week-1 template into planned exercises for every week.

    - Linear: numeric loads grow by ``load_increment_pct * (week-1)`` percent
      and the template's total reps compound by ``volume_increment_pct``,
      redistributed across sets (earlier sets take the remainder).
    - Undulating: each set's reps scale by that week's target percentage
      (never below 1 rep).
    - None: every week is a copy of the template.

    The template is never modified; new instances are returned.

    Args:
        base_exercises: Week-1 exercise instances
        total_weeks: Program length (>= 1)
        periodization_type: Declared periodization
        settings: Progression settings

    Returns:
        Mapping of week number to progressed exercise instances

    Raises:
        InvalidProgramLengthError: total_weeks < 1
    """
    _validate_total_weeks(total_weeks)
    periodization_type = PeriodizationType(periodization_type)
    settings = settings or ProgressionSettings()
    targets = resolve_weekly_targets(periodization_type, total_weeks, settings)

    weeks: Dict[int, List[ExerciseInstance]] = {}
    for week in range(1, total_weeks + 1):
        week_pct = targets[week - 1]
        weeks[week] = [
            exercise.model_copy(
                update={
                    "planned_sets": _progress_sets(
                        exercise.planned_sets, week, periodization_type, settings, week_pct
                    ),
                    "actual_sets": [],
                }
            )
            for exercise in base_exercises
        ]

    logger.debug(
        f"Generated {total_weeks} {periodization_type.value} weeks "
        f"from {len(base_exercises)} template exercises"
    )
    return weeks
