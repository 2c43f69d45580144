"""
Analysis result models.

These are the shapes handed to the charting layer. ``None`` always means
"no data recorded" and is kept distinct from a recorded zero. Serialize with
``model_dump(by_alias=True)`` to get the camelCase keys the charts consume.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from domain.models.program import ExerciseKey


class ProgressionType(str, Enum):
    """Shape of the week-over-week planned volume curve."""

    LINEAR = "linear"
    UNDULATING = "undulating"
    MIXED = "mixed"
    NONE = "none"


class _AnalysisModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class VolumeDataPoint(_AnalysisModel):
    """Planned vs actual volume for one week."""

    week: int = Field(..., ge=1)
    planned_volume: float = Field(..., ge=0)
    actual_volume: Optional[float] = Field(default=None, ge=0)
    volume_difference: Optional[float] = None  # actual - planned
    volume_percentage: Optional[float] = None  # actual / planned * 100


class ExerciseVolumeData(_AnalysisModel):
    """Volume series and totals for a single exercise."""

    exercise_key: ExerciseKey
    exercise_id: int
    exercise_name: str
    weekly_data: List[VolumeDataPoint] = Field(default_factory=list)
    total_planned_volume: float = Field(default=0.0, ge=0)
    total_actual_volume: Optional[float] = None
    average_volume_percentage: Optional[float] = None


class ProgramVolumeAnalysis(_AnalysisModel):
    """Per-exercise and program-wide volume analysis."""

    program_id: Optional[int] = None
    program_name: str
    total_weeks: int = Field(..., ge=1)
    load_unit: str
    exercise_data: List[ExerciseVolumeData] = Field(default_factory=list)
    overall_volume_data: List[VolumeDataPoint] = Field(default_factory=list)
    total_planned_volume: float = Field(default=0.0, ge=0)
    total_actual_volume: Optional[float] = None
    average_volume_percentage: Optional[float] = None

    @property
    def planned_series(self) -> List[float]:
        return [point.planned_volume for point in self.overall_volume_data]

    @property
    def actual_series(self) -> List[Optional[float]]:
        return [point.actual_volume for point in self.overall_volume_data]


class VolumeProgression(_AnalysisModel):
    """Classification of the planned week-over-week volume trend."""

    is_progressive: bool = False
    progression_type: ProgressionType = ProgressionType.NONE
    average_weekly_increase_pct: float = 0.0
    consistency: float = Field(default=0.0, ge=0, le=100)


class AdherenceReport(_AnalysisModel):
    """
    Planned vs actual trajectories relative to week 1.

    ``consistency`` is None when no week after the baseline has actual data.
    """

    planned_percentages: List[float] = Field(default_factory=list)
    actual_percentages: List[Optional[float]] = Field(default_factory=list)
    target_percentages: List[float] = Field(default_factory=list)
    consistency: Optional[float] = Field(default=None, ge=0, le=100)
    valid_weeks: int = 0
    total_weeks: int = 0


class SessionStats(_AnalysisModel):
    """Summary of one session's planned work."""

    estimated_duration: str
    total_exercises: int = 0
    total_sets: int = 0
    total_reps: int = 0
    total_load: float = 0.0
    duration_seconds: float = 0.0
