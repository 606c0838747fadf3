"""Linear units and the cubic units derived from them."""

from __future__ import annotations

from enum import Enum


class VolumeUnit(str, Enum):
    """Cubic unit of a volume value."""

    CUBIC_MILLIMETER = "mm3"
    CUBIC_CENTIMETER = "cm3"
    CUBIC_METER = "m3"
    CUBIC_INCH = "in3"
    CUBIC_FOOT = "ft3"

    @property
    def linear(self) -> "LengthUnit":
        """The length unit whose cube this is."""
        return LengthUnit(self.value[:-1])


class LengthUnit(str, Enum):
    """Unit of measurement passed to the hook; its cube is the volume's unit."""

    MILLIMETER = "mm"
    CENTIMETER = "cm"
    METER = "m"
    INCH = "in"
    FOOT = "ft"

    @property
    def cubic(self) -> VolumeUnit:
        return VolumeUnit(f"{self.value}3")


# Accepted spellings -> canonical length unit
_ALIASES = {
    "millimeter": LengthUnit.MILLIMETER,
    "millimeters": LengthUnit.MILLIMETER,
    "centimeter": LengthUnit.CENTIMETER,
    "centimeters": LengthUnit.CENTIMETER,
    "meter": LengthUnit.METER,
    "meters": LengthUnit.METER,
    "inch": LengthUnit.INCH,
    "inches": LengthUnit.INCH,
    "foot": LengthUnit.FOOT,
    "feet": LengthUnit.FOOT,
}


def parse_length_unit(value: LengthUnit | str) -> LengthUnit:
    """
    Normalize a length unit given as enum member or string (e.g. 'cm', 'Inches').
    Raises ValueError for anything unrecognised.
    """
    if isinstance(value, LengthUnit):
        return value
    s = (value or "").strip().lower() if isinstance(value, str) else ""
    if s in _ALIASES:
        return _ALIASES[s]
    try:
        return LengthUnit(s)
    except ValueError:
        raise ValueError(f"Unknown length unit: {value!r}") from None
