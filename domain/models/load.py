"""
Load value objects for exercise weight/resistance.

A set's raw ``load`` field is free text coming from the program editor: a
numeric literal ("135"), a bodyweight marker ("BW", "bw+10"), or a band
color ("red band"). ``parse_load`` turns that text into one of three tagged
variants so volume rules can branch on the type instead of sniffing strings.
"""

import math
from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, Field


# Conversion constant
KG_TO_LBS = 2.20462


class LoadUnit(str, Enum):
    """Units a load (and therefore a volume) can be expressed in."""

    LBS = "lbs"
    KG = "kg"


# Per-set unit spellings accepted from stored sets
_UNIT_ALIASES = {
    "lbs": LoadUnit.LBS,
    "lb": LoadUnit.LBS,
    "kg": LoadUnit.KG,
}


def coerce_set_unit(raw: object) -> Optional[LoadUnit]:
    """
    Map a stored per-set unit onto a LoadUnit.

    Returns:
        The matching LoadUnit, or None when the value is not a known unit.
    """
    if isinstance(raw, LoadUnit):
        return raw
    if not isinstance(raw, str):
        return None
    return _UNIT_ALIASES.get(raw.strip().lower())


def convert_load(value: float, from_unit: LoadUnit, to_unit: LoadUnit) -> float:
    """
    Convert a load value between pounds and kilograms.

    Args:
        value: The numeric load
        from_unit: Unit the value is expressed in
        to_unit: Unit to convert to

    Returns:
        The converted value (unrounded).
    """
    if from_unit == to_unit:
        return value
    if from_unit == LoadUnit.KG:
        return value * KG_TO_LBS
    return value / KG_TO_LBS


class NumericLoad(BaseModel):
    """
    A quantifiable external load.

    Examples:
        >>> load = NumericLoad(value=100, unit="kg")
        >>> round(load.in_unit(LoadUnit.LBS), 3)
        220.462
    """

    kind: Literal["numeric"] = "numeric"
    value: float
    unit: LoadUnit = LoadUnit.LBS

    def in_unit(self, unit: LoadUnit) -> float:
        """Return the load expressed in ``unit``."""
        return convert_load(self.value, self.unit, unit)

    @property
    def is_quantifiable(self) -> bool:
        return self.value > 0

    def __str__(self) -> str:
        return f"{self.value:g} {self.unit.value}"

    model_config = {"frozen": True}


class BodyweightLoad(BaseModel):
    """Bodyweight work ("BW"). Has no external load, so no volume."""

    kind: Literal["bodyweight"] = "bodyweight"
    label: str = "BW"

    @property
    def is_quantifiable(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.label

    model_config = {"frozen": True}


class BandLoad(BaseModel):
    """
    Band resistance or any other non-numeric label.

    Bands have no canonical weight equivalent, so they contribute zero
    volume even though a real training load was applied.
    """

    kind: Literal["band"] = "band"
    label: str = Field(..., min_length=1)

    @property
    def is_quantifiable(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.label

    model_config = {"frozen": True}


Load = Union[NumericLoad, BodyweightLoad, BandLoad]


def parse_load(raw: object, unit: LoadUnit = LoadUnit.LBS) -> Optional[Load]:
    """
    Parse a stored load field into a Load variant.

    Args:
        raw: Stored load value (usually a string, sometimes a number)
        unit: Unit attached to the set

    Returns:
        NumericLoad for finite numbers, BodyweightLoad for "bw" tokens,
        BandLoad for any other text, or None when the field is blank.
    """
    if raw is None or isinstance(raw, bool):
        return None

    if isinstance(raw, (int, float)):
        if not math.isfinite(raw):
            return None
        return NumericLoad(value=float(raw), unit=unit)

    text = str(raw).strip()
    if not text:
        return None

    try:
        value = float(text)
    except ValueError:
        value = None

    if value is not None and math.isfinite(value):
        return NumericLoad(value=value, unit=unit)

    if "bw" in text.lower():
        return BodyweightLoad(label=text)

    return BandLoad(label=text)
