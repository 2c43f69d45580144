"""
Training program aggregate.

A Program is made of weeks; each week holds exercise instances, and each
instance holds the planned sets and (once the session is logged) the actual
sets. The analysis engine only reads these models; it never mutates them.
"""

from enum import Enum
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator, model_validator

from domain.models.exercise_set import ExerciseSet


class PeriodizationType(str, Enum):
    """Declared periodization of a program."""

    NONE = "None"
    LINEAR = "Linear"
    UNDULATING = "Undulating"


class ExerciseSource(str, Enum):
    """Which catalog an exercise comes from."""

    LIBRARY = "library"
    USER = "user"


class ExerciseKey(BaseModel):
    """
    Identity of an exercise across weeks.

    Library and user-defined exercises live in separate id spaces, so the
    source is part of the key.
    """

    source: ExerciseSource
    id: int

    def __str__(self) -> str:
        return f"{self.source.value}:{self.id}"

    model_config = {"frozen": True}


class ProgressionSettings(BaseModel):
    """Progression rules configured on a program."""

    volume_increment_pct: float = Field(
        default=0.0,
        validation_alias=AliasChoices(
            "volume_increment_pct",
            "volumeIncrementPct",
            "volume_increment_percentage",
        ),
        serialization_alias="volumeIncrementPct",
        description="Week-over-week compounded volume increase (Linear)",
    )
    load_increment_pct: float = Field(
        default=0.0,
        validation_alias=AliasChoices(
            "load_increment_pct",
            "loadIncrementPct",
            "load_increment_percentage",
        ),
        serialization_alias="loadIncrementPct",
        description="Per-week load increase relative to week 1 (Linear)",
    )
    weekly_volume_percentages: List[float] = Field(
        default_factory=list,
        validation_alias=AliasChoices(
            "weekly_volume_percentages",
            "weeklyVolumePercentages",
        ),
        serialization_alias="weeklyVolumePercentages",
        description="Manual per-week volume targets (Undulating override)",
    )

    @field_validator("volume_increment_pct", "load_increment_pct", mode="before")
    @classmethod
    def default_missing_increment(cls, v):
        return 0.0 if v is None else v

    @field_validator("weekly_volume_percentages", mode="before")
    @classmethod
    def default_missing_percentages(cls, v):
        return [] if v is None else v

    model_config = {"frozen": True, "populate_by_name": True}


class ExerciseInstance(BaseModel):
    """
    One occurrence of an exercise inside one program week.

    Exactly one of ``exercise_library_id`` / ``user_exercise_library_id`` is
    set. ``actual_sets`` stays empty until the session is logged.
    """

    exercise_library_id: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("exercise_library_id", "exerciseLibraryId"),
        serialization_alias="exerciseLibraryId",
    )
    user_exercise_library_id: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices(
            "user_exercise_library_id", "userExerciseLibraryId"
        ),
        serialization_alias="userExerciseLibraryId",
    )
    exercise_name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("exercise_name", "exerciseName"),
        serialization_alias="exerciseName",
    )
    planned_sets: List[ExerciseSet] = Field(
        default_factory=list,
        validation_alias=AliasChoices("planned_sets", "plannedSets"),
        serialization_alias="plannedSets",
    )
    actual_sets: List[ExerciseSet] = Field(
        default_factory=list,
        validation_alias=AliasChoices("actual_sets", "actualSets"),
        serialization_alias="actualSets",
    )

    @field_validator("planned_sets", "actual_sets", mode="before")
    @classmethod
    def default_missing_sets(cls, v):
        return [] if v is None else v

    @model_validator(mode="after")
    def validate_exercise_reference(self) -> "ExerciseInstance":
        """Library and user exercise ids are mutually exclusive."""
        has_library = self.exercise_library_id is not None
        has_user = self.user_exercise_library_id is not None
        if has_library == has_user:
            raise ValueError(
                "Exactly one of exercise_library_id or user_exercise_library_id is required"
            )
        return self

    @property
    def key(self) -> ExerciseKey:
        if self.exercise_library_id is not None:
            return ExerciseKey(source=ExerciseSource.LIBRARY, id=self.exercise_library_id)
        return ExerciseKey(source=ExerciseSource.USER, id=self.user_exercise_library_id)

    @property
    def display_name(self) -> str:
        """Exercise name, or a placeholder derived from the catalog id."""
        if self.exercise_name:
            return self.exercise_name
        if self.exercise_library_id is not None:
            return f"Exercise {self.exercise_library_id}"
        return f"User Exercise {self.user_exercise_library_id}"

    @property
    def is_performed(self) -> bool:
        return len(self.actual_sets) > 0

    model_config = {"frozen": True, "populate_by_name": True}


class ProgramWeek(BaseModel):
    """The exercises programmed for one week (1-indexed)."""

    week_number: int = Field(
        ...,
        validation_alias=AliasChoices("week_number", "weekNumber", "week"),
        serialization_alias="weekNumber",
    )
    exercises: List[ExerciseInstance] = Field(
        default_factory=list,
        validation_alias=AliasChoices(
            "exercises", "exerciseInstances", "exercise_instances"
        ),
        serialization_alias="exerciseInstances",
    )

    model_config = {"frozen": True, "populate_by_name": True}


class Program(BaseModel):
    """
    Aggregate root for a multi-week resistance-training program.

    Weeks may be omitted (an omitted week is treated as empty). Week numbers
    are checked against ``total_weeks`` when the analysis index is built.

    Examples:
        >>> program = Program(
        ...     id=7,
        ...     name="Hypertrophy Block",
        ...     total_weeks=2,
        ...     weeks=[
        ...         ProgramWeek(week_number=1, exercises=[
        ...             ExerciseInstance(
        ...                 exercise_library_id=1,
        ...                 exercise_name="Back Squat",
        ...                 planned_sets=[ExerciseSet(reps=5, load="225")],
        ...             ),
        ...         ]),
        ...     ],
        ... )
        >>> program.week(2).exercises
        []
    """

    id: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("id", "resistanceProgramId", "programId"),
    )
    name: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("name", "programName"),
    )
    total_weeks: int = Field(
        ...,
        ge=1,
        validation_alias=AliasChoices("total_weeks", "totalWeeks", "programDuration"),
        serialization_alias="totalWeeks",
    )
    periodization_type: PeriodizationType = Field(
        default=PeriodizationType.NONE,
        validation_alias=AliasChoices("periodization_type", "periodizationType"),
        serialization_alias="periodizationType",
    )
    progression_settings: ProgressionSettings = Field(
        default_factory=ProgressionSettings,
        validation_alias=AliasChoices(
            "progression_settings", "progressionSettings"
        ),
        serialization_alias="progressionSettings",
    )
    weeks: List[ProgramWeek] = Field(default_factory=list)

    @field_validator("periodization_type", mode="before")
    @classmethod
    def default_missing_periodization(cls, v):
        return PeriodizationType.NONE if v is None else v

    @field_validator("progression_settings", mode="before")
    @classmethod
    def default_missing_settings(cls, v):
        return ProgressionSettings() if v is None else v

    @field_validator("weeks", mode="before")
    @classmethod
    def default_missing_weeks(cls, v):
        return [] if v is None else v

    def week(self, week_number: int) -> ProgramWeek:
        """Return the given week, or an empty week if it was not authored."""
        for week in self.weeks:
            if week.week_number == week_number:
                return week
        return ProgramWeek(week_number=week_number)

    model_config = {"frozen": True, "populate_by_name": True}
