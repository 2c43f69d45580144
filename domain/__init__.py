"""
Domain layer for the volume analysis engine.

This package contains pure domain models that are independent of
persistence and presentation concerns.
"""

from domain.models import (
    ExerciseInstance,
    ExerciseSet,
    LoadUnit,
    PeriodizationType,
    Program,
    ProgramVolumeAnalysis,
    ProgramWeek,
    ProgressionSettings,
    VolumeProgression,
)

__all__ = [
    "ExerciseInstance",
    "ExerciseSet",
    "LoadUnit",
    "PeriodizationType",
    "Program",
    "ProgramVolumeAnalysis",
    "ProgramWeek",
    "ProgressionSettings",
    "VolumeProgression",
]
