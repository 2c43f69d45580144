"""
Exercise set value object.

One planned or actual set as stored by the program editor. Fields mirror the
stored JSON shape (camelCase keys are accepted) and are deliberately lenient:
malformed per-set data degrades to defaults instead of failing validation.
"""

import logging
from typing import List, Literal, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator

from domain.models.load import Load, LoadUnit, coerce_set_unit, parse_load

logger = logging.getLogger(__name__)


DEFAULT_TEMPO = "2010"


class ExerciseSet(BaseModel):
    """
    Value object representing a single set.

    Examples:
        >>> s = ExerciseSet(reps=10, load="135", loadUnit="lbs", restSec=90)
        >>> s.parsed_load.value
        135.0

        >>> ExerciseSet(reps=12, load="BW").parsed_load.kind
        'bodyweight'
    """

    set_index: Optional[int] = Field(
        default=None,
        ge=1,
        validation_alias=AliasChoices("set_index", "setIndex", "set"),
        serialization_alias="setIndex",
        description="1-based position of the set within the exercise",
    )
    reps: Optional[int] = Field(default=None, ge=0, description="Repetitions")
    load: Optional[str] = Field(
        default=None,
        description="Numeric literal, 'BW', or a band color token",
    )
    load_unit: LoadUnit = Field(
        default=LoadUnit.LBS,
        validation_alias=AliasChoices("load_unit", "loadUnit"),
        serialization_alias="loadUnit",
    )
    rest_seconds: int = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices("rest_seconds", "restSeconds", "restSec"),
        serialization_alias="restSeconds",
    )
    tempo: Optional[str] = Field(
        default=None,
        description="4-character tempo code (eccentric, pause, concentric, pause)",
    )
    rpe: Optional[float] = Field(default=None, ge=0)
    rir: Optional[float] = Field(default=None, ge=0)

    # Non-rep exercise families (cardio, carries)
    duration: Optional[float] = Field(default=None, ge=0)
    duration_unit: Literal["seconds", "minutes"] = Field(
        default="minutes",
        validation_alias=AliasChoices("duration_unit", "durationUnit"),
        serialization_alias="durationUnit",
    )
    distance: Optional[float] = Field(default=None, ge=0)
    distance_unit: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("distance_unit", "distanceUnit"),
        serialization_alias="distanceUnit",
    )

    sub_sets: List["ExerciseSet"] = Field(
        default_factory=list,
        validation_alias=AliasChoices("sub_sets", "subSets"),
        serialization_alias="subSets",
    )
    notes: Optional[str] = None

    @field_validator("load", mode="before")
    @classmethod
    def stringify_load(cls, v):
        """Stored loads are text; accept bare numbers too."""
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, bool):
            return None
        return str(v)

    @field_validator("load_unit", mode="before")
    @classmethod
    def default_unknown_unit(cls, v):
        """Unknown or missing per-set units fall back to pounds."""
        if v is None:
            return LoadUnit.LBS
        unit = coerce_set_unit(v)
        if unit is None:
            logger.warning(f"Unknown set load unit {v!r}, assuming lbs")
            return LoadUnit.LBS
        return unit

    @field_validator("duration_unit", mode="before")
    @classmethod
    def default_duration_unit(cls, v):
        return "seconds" if v == "seconds" else "minutes"

    @field_validator("rest_seconds", mode="before")
    @classmethod
    def default_missing_rest(cls, v):
        return 0 if v is None else v

    @field_validator("sub_sets", mode="before")
    @classmethod
    def default_missing_sub_sets(cls, v):
        return [] if v is None else v

    @property
    def parsed_load(self) -> Optional[Load]:
        """The load field as a tagged Load variant (None when blank)."""
        return parse_load(self.load, self.load_unit)

    @property
    def duration_seconds(self) -> Optional[float]:
        """Duration converted to seconds, or None for rep-based sets."""
        if self.duration is None:
            return None
        if self.duration_unit == "seconds":
            return self.duration
        return self.duration * 60

    model_config = {"frozen": True, "populate_by_name": True}
