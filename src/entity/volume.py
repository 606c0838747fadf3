"""Volume value: magnitude plus cubic unit. None is the absent sentinel."""

from __future__ import annotations

import math
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from entity.units import LengthUnit, VolumeUnit


class Volume(BaseModel):
    model_config = ConfigDict(frozen=True)

    volume: float
    unit: VolumeUnit

    @field_validator("volume")
    @classmethod
    def _finite_non_negative(cls, v: float) -> float:
        if not math.isfinite(v) or v < 0:
            raise ValueError(f"volume must be a finite, non-negative number: {v}")
        return v

    def matches(self, unit: LengthUnit) -> bool:
        """True when this volume is expressed in the cube of `unit`."""
        return self.unit is unit.cubic

    def to_dict(self) -> Dict[str, Any]:
        return {"volume": self.volume, "unit": self.unit.value}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["Volume"]:
        """Parse the wire form {'volume': .., 'unit': ..}; None or {} means absent."""
        if not data:
            return None
        return cls.model_validate(data)


def volume_to_dict(volume: Optional[Volume]) -> Optional[Dict[str, Any]]:
    return volume.to_dict() if volume is not None else None
