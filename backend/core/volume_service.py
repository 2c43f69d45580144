"""
Volume aggregation for training programs.

Volume is reps x load, expressed in the caller's preferred unit. This module
rolls set volumes up into per-exercise and program-wide weekly series:

- Set volume with lbs/kg conversion (non-numeric loads contribute zero)
- Exercise planned/actual totals for one week, with "no actual data" as None
- Per-exercise weekly series (weeks where the exercise is absent are skipped)
- Program-wide weekly series (one entry per program week, always)
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from application.exceptions import (
    DuplicateWeekError,
    InvalidLoadUnitError,
    WeekOutOfRangeError,
)
from domain.models.analysis import (
    ExerciseVolumeData,
    ProgramVolumeAnalysis,
    VolumeDataPoint,
)
from domain.models.exercise_set import ExerciseSet
from domain.models.load import LoadUnit, NumericLoad
from domain.models.program import ExerciseInstance, ExerciseKey, Program

logger = logging.getLogger(__name__)


def resolve_load_unit(unit: object) -> LoadUnit:
    """
    Validate a caller-supplied preferred unit.

    Raises:
        InvalidLoadUnitError: If the unit is not "lbs" or "kg"
    """
    if isinstance(unit, LoadUnit):
        return unit
    if isinstance(unit, str):
        try:
            return LoadUnit(unit)
        except ValueError:
            pass
    raise InvalidLoadUnitError(unit)


# =============================================================================
# Set / Exercise Volume
# =============================================================================


def calculate_set_volume(
    exercise_set: ExerciseSet,
    preferred_unit: LoadUnit = LoadUnit.LBS,
) -> float:
    """
    Calculate volume for a single set.

    Formula: volume = reps * load (load converted to ``preferred_unit``)

    Bodyweight and band loads have no quantifiable weight and always yield 0,
    as do sets with missing reps or a missing load.

    Args:
        exercise_set: The set to measure
        preferred_unit: Unit the volume is expressed in

    Returns:
        Volume, never negative
    """
    unit = resolve_load_unit(preferred_unit)
    reps = exercise_set.reps or 0
    if reps <= 0:
        return 0.0

    load = exercise_set.parsed_load
    if not isinstance(load, NumericLoad) or not load.is_quantifiable:
        return 0.0

    return reps * load.in_unit(unit)


@dataclass(frozen=True)
class ExerciseVolume:
    """Planned and actual volume of one exercise instance."""

    planned: float
    actual: Optional[float]


def calculate_exercise_volume(
    instance: ExerciseInstance,
    preferred_unit: LoadUnit = LoadUnit.LBS,
) -> ExerciseVolume:
    """
    Sum planned and actual set volumes for one exercise instance.

    ``actual`` is None unless at least one actual set has positive volume, so
    an unperformed exercise and one performed entirely at bodyweight both
    report None.

    Args:
        instance: Exercise instance for a single week
        preferred_unit: Unit the volume is expressed in

    Returns:
        ExerciseVolume with planned total and optional actual total
    """
    planned = sum(
        (calculate_set_volume(s, preferred_unit) for s in instance.planned_sets),
        0.0,
    )

    actual = 0.0
    has_actual_data = False
    for s in instance.actual_sets:
        volume = calculate_set_volume(s, preferred_unit)
        actual += volume
        has_actual_data = has_actual_data or volume > 0

    return ExerciseVolume(planned=planned, actual=actual if has_actual_data else None)


# =============================================================================
# Data Points
# =============================================================================


def build_volume_data_point(
    week: int,
    planned: float,
    actual: Optional[float],
) -> VolumeDataPoint:
    """
    Build a data point, deriving difference and percentage.

    The percentage is None whenever actual data is missing or the planned
    volume is zero.
    """
    if actual is None:
        return VolumeDataPoint(week=week, planned_volume=planned)

    return VolumeDataPoint(
        week=week,
        planned_volume=planned,
        actual_volume=actual,
        volume_difference=actual - planned,
        volume_percentage=(actual / planned) * 100 if planned > 0 else None,
    )


def _average_percentage(total_actual: Optional[float], total_planned: float) -> Optional[float]:
    if total_actual is None or total_planned <= 0:
        return None
    return (total_actual / total_planned) * 100


# =============================================================================
# Program Index
# =============================================================================


InstanceIndex = Dict[Tuple[int, ExerciseKey], ExerciseInstance]


@dataclass(frozen=True)
class ProgramIndex:
    """
    Composite-key view of a program.

    ``instances`` maps (week_number, exercise key) to the first matching
    instance in that week; ``exercise_order`` lists each exercise key in order
    of first appearance.
    """

    total_weeks: int
    instances: InstanceIndex
    exercise_order: List[ExerciseKey]

    def get(self, week_number: int, key: ExerciseKey) -> Optional[ExerciseInstance]:
        return self.instances.get((week_number, key))


def build_program_index(program: Program) -> ProgramIndex:
    """
    Index a program's exercise instances by (week, exercise key).

    Raises:
        WeekOutOfRangeError: A week number falls outside [1, total_weeks]
        DuplicateWeekError: A week number appears twice
    """
    seen_weeks = set()
    instances: InstanceIndex = {}
    order: List[ExerciseKey] = []

    for week in sorted(program.weeks, key=lambda w: w.week_number):
        if week.week_number < 1 or week.week_number > program.total_weeks:
            raise WeekOutOfRangeError(week.week_number, program.total_weeks)
        if week.week_number in seen_weeks:
            raise DuplicateWeekError(week.week_number)
        seen_weeks.add(week.week_number)

        for instance in week.exercises:
            key = instance.key
            if key not in order:
                order.append(key)
            instances.setdefault((week.week_number, key), instance)

    return ProgramIndex(
        total_weeks=program.total_weeks,
        instances=instances,
        exercise_order=order,
    )


# =============================================================================
# Weekly / Program Aggregation
# =============================================================================


def calculate_exercise_volume_data(
    key: ExerciseKey,
    index: ProgramIndex,
    preferred_unit: LoadUnit = LoadUnit.LBS,
) -> ExerciseVolumeData:
    """
    Calculate one exercise's weekly volume series and totals.

    Weeks where the exercise is not programmed are skipped rather than
    zero-filled. A programmed week with no sets still yields a zero-planned
    entry.

    Args:
        key: Exercise to analyze
        index: Program index from build_program_index()
        preferred_unit: Unit the volume is expressed in

    Returns:
        ExerciseVolumeData for the exercise
    """
    weekly_data: List[VolumeDataPoint] = []
    total_planned = 0.0
    total_actual: Optional[float] = None
    exercise_name: Optional[str] = None

    for week_number in range(1, index.total_weeks + 1):
        instance = index.get(week_number, key)
        if instance is None:
            continue

        if exercise_name is None:
            exercise_name = instance.display_name

        volume = calculate_exercise_volume(instance, preferred_unit)
        weekly_data.append(build_volume_data_point(week_number, volume.planned, volume.actual))

        total_planned += volume.planned
        if volume.actual is not None:
            total_actual = (total_actual or 0.0) + volume.actual

    logger.debug(
        f"Exercise {key}: {len(weekly_data)} programmed weeks, "
        f"planned={total_planned:.1f}, actual={total_actual}"
    )

    return ExerciseVolumeData(
        exercise_key=key,
        exercise_id=key.id,
        exercise_name=exercise_name or str(key),
        weekly_data=weekly_data,
        total_planned_volume=total_planned,
        total_actual_volume=total_actual,
        average_volume_percentage=_average_percentage(total_actual, total_planned),
    )


def calculate_week_volume(
    instances: Iterable[ExerciseInstance],
    week_number: int,
    preferred_unit: LoadUnit = LoadUnit.LBS,
) -> VolumeDataPoint:
    """
    Sum every exercise instance programmed in one week.

    The week has actual data when at least one exercise reports an actual
    volume.
    """
    planned = 0.0
    actual: Optional[float] = None

    for instance in instances:
        volume = calculate_exercise_volume(instance, preferred_unit)
        planned += volume.planned
        if volume.actual is not None:
            actual = (actual or 0.0) + volume.actual

    return build_volume_data_point(week_number, planned, actual)


def calculate_program_volume_analysis(
    program: Program,
    preferred_unit: LoadUnit = LoadUnit.LBS,
) -> ProgramVolumeAnalysis:
    """
    Calculate per-exercise and program-wide volume analysis.

    Args:
        program: Program to analyze (read-only)
        preferred_unit: Unit every volume number is expressed in

    Returns:
        ProgramVolumeAnalysis with one overall data point per program week

    Raises:
        InvalidLoadUnitError: preferred_unit is not lbs/kg
        WeekOutOfRangeError: A week falls outside [1, total_weeks]
        DuplicateWeekError: A week number appears twice
    """
    unit = resolve_load_unit(preferred_unit)
    index = build_program_index(program)

    exercise_data = [
        calculate_exercise_volume_data(key, index, unit)
        for key in index.exercise_order
    ]

    overall: List[VolumeDataPoint] = []
    total_planned = 0.0
    total_actual: Optional[float] = None

    for week_number in range(1, program.total_weeks + 1):
        point = calculate_week_volume(
            program.week(week_number).exercises, week_number, unit
        )
        overall.append(point)
        total_planned += point.planned_volume
        if point.actual_volume is not None:
            total_actual = (total_actual or 0.0) + point.actual_volume

    return ProgramVolumeAnalysis(
        program_id=program.id,
        program_name=program.name,
        total_weeks=program.total_weeks,
        load_unit=unit.value,
        exercise_data=exercise_data,
        overall_volume_data=overall,
        total_planned_volume=total_planned,
        total_actual_volume=total_actual,
        average_volume_percentage=_average_percentage(total_actual, total_planned),
    )
