"""
Program factories for tests.

Small builders for sets, exercise instances and programs so tests can
describe a program as plain numbers.

Usage:
    from tests.factories import make_set, make_instance, make_program

    squat = make_instance(1, "Squat", planned=[(5, "100")], actual=[(5, "100")])
    program = make_program({1: [squat], 2: [squat]})
"""
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from domain.models import (
    ExerciseInstance,
    ExerciseSet,
    PeriodizationType,
    Program,
    ProgramWeek,
    ProgressionSettings,
)

SetInput = Union[ExerciseSet, Tuple[Optional[int], Optional[str]], Tuple[Optional[int], Optional[str], str]]


def make_set(
    reps: Optional[int] = 10,
    load: Optional[str] = "100",
    unit: str = "lbs",
    **extra,
) -> ExerciseSet:
    """Build a set; extra keyword arguments go straight to ExerciseSet."""
    return ExerciseSet(reps=reps, load=load, load_unit=unit, **extra)


def _to_sets(items: Optional[Iterable[SetInput]]) -> List[ExerciseSet]:
    sets = []
    for index, item in enumerate(items or [], start=1):
        if isinstance(item, ExerciseSet):
            sets.append(item)
            continue
        reps, load, *rest = item
        unit = rest[0] if rest else "lbs"
        sets.append(make_set(reps, load, unit, set_index=index))
    return sets


def make_instance(
    exercise_id: int = 1,
    name: Optional[str] = "Back Squat",
    planned: Optional[Sequence[SetInput]] = None,
    actual: Optional[Sequence[SetInput]] = None,
    user_exercise: bool = False,
) -> ExerciseInstance:
    """Build an exercise instance from (reps, load[, unit]) tuples."""
    ids = (
        {"user_exercise_library_id": exercise_id}
        if user_exercise
        else {"exercise_library_id": exercise_id}
    )
    return ExerciseInstance(
        exercise_name=name,
        planned_sets=_to_sets(planned),
        actual_sets=_to_sets(actual),
        **ids,
    )


def make_program(
    weeks: Dict[int, List[ExerciseInstance]],
    total_weeks: Optional[int] = None,
    periodization_type: PeriodizationType = PeriodizationType.NONE,
    settings: Optional[ProgressionSettings] = None,
    program_id: int = 1,
    name: str = "Test Program",
) -> Program:
    """Build a program from {week_number: [instances]}."""
    return Program(
        id=program_id,
        name=name,
        total_weeks=total_weeks or max(weeks, default=1),
        periodization_type=periodization_type,
        progression_settings=settings or ProgressionSettings(),
        weeks=[
            ProgramWeek(week_number=number, exercises=instances)
            for number, instances in sorted(weeks.items())
        ],
    )


def planned_only_program(volumes: Sequence[float]) -> Program:
    """One exercise per week with a single 1-rep set at the given load."""
    return make_program(
        {
            week: [make_instance(1, "Deadlift", planned=[(1, str(volume))])]
            for week, volume in enumerate(volumes, start=1)
        }
    )
