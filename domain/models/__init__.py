"""
Domain models for the volume analysis engine.

This package contains pure domain models that are independent of
persistence and presentation concerns.

These models represent the core concepts:
- Program: The aggregate root containing weeks of exercise instances
- ProgramWeek: The exercises programmed for one week
- ExerciseInstance: One exercise in one week, with planned and actual sets
- ExerciseSet: A single set (reps, load, tempo, rest, ...)
- Load: Tagged load variants (numeric, bodyweight, band)
- Analysis results: volume series, progression, adherence, session stats

Usage:
    >>> from domain.models import Program, ProgramWeek, ExerciseInstance, ExerciseSet

    >>> program = Program.model_validate({
    ...     "id": 1,
    ...     "programName": "Base Strength",
    ...     "totalWeeks": 1,
    ...     "weeks": [{
    ...         "weekNumber": 1,
    ...         "exerciseInstances": [{
    ...             "exerciseLibraryId": 12,
    ...             "plannedSets": [{"setIndex": 1, "reps": 5, "load": "100", "loadUnit": "kg"}],
    ...         }],
    ...     }],
    ... })
"""

from domain.models.analysis import (
    AdherenceReport,
    ExerciseVolumeData,
    ProgramVolumeAnalysis,
    ProgressionType,
    SessionStats,
    VolumeDataPoint,
    VolumeProgression,
)
from domain.models.exercise_set import DEFAULT_TEMPO, ExerciseSet
from domain.models.load import (
    KG_TO_LBS,
    BandLoad,
    BodyweightLoad,
    Load,
    LoadUnit,
    NumericLoad,
    convert_load,
    parse_load,
)
from domain.models.program import (
    ExerciseInstance,
    ExerciseKey,
    ExerciseSource,
    PeriodizationType,
    Program,
    ProgramWeek,
    ProgressionSettings,
)

__all__ = [
    # Program structure
    "Program",
    "ProgramWeek",
    "ExerciseInstance",
    "ExerciseKey",
    "ExerciseSet",
    "ProgressionSettings",
    # Loads
    "Load",
    "NumericLoad",
    "BodyweightLoad",
    "BandLoad",
    "convert_load",
    "parse_load",
    # Results
    "VolumeDataPoint",
    "ExerciseVolumeData",
    "ProgramVolumeAnalysis",
    "VolumeProgression",
    "AdherenceReport",
    "SessionStats",
    # Enums
    "LoadUnit",
    "ExerciseSource",
    "PeriodizationType",
    "ProgressionType",
    # Constants
    "KG_TO_LBS",
    "DEFAULT_TEMPO",
]
