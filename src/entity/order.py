"""Order as seen by volume extensions. Frozen: extensions read it, never change it."""

from __future__ import annotations

import copy
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from entity.units import LengthUnit


def freeze(value: Any) -> Any:
    """Recursively make host data immutable: dict -> read-only mapping, list -> tuple, set -> frozenset."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(v) for v in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(freeze(v) for v in value)
    return value


def thaw(value: Any) -> Any:
    """Inverse of freeze for serialization: plain dicts and lists."""
    if isinstance(value, Mapping):
        return {k: thaw(v) for k, v in value.items()}
    if isinstance(value, (tuple, frozenset)):
        return [thaw(v) for v in value]
    return value


class OrderLineItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    sku: str
    quantity: float = Field(default=1, ge=0)
    length: Optional[float] = Field(default=None, ge=0)
    width: Optional[float] = Field(default=None, ge=0)
    height: Optional[float] = Field(default=None, ge=0)
    dimension_unit: Optional[LengthUnit] = None

    @property
    def has_dimensions(self) -> bool:
        return None not in (self.length, self.width, self.height, self.dimension_unit)


class Order(BaseModel):
    """
    Opaque commerce order owned by the host. Only identity and attributes are
    exposed; `data` holds any extra host attributes as a read-only mapping.
    """

    model_config = ConfigDict(frozen=True)

    order_id: str
    status: str = "cart"
    line_items: Tuple[OrderLineItem, ...] = ()
    data: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)

    @field_validator("data", mode="after")
    @classmethod
    def _read_only_data(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        # copy first so the caller's nested objects are not shared with the order
        return freeze(copy.deepcopy(dict(v)))

    def to_dict(self) -> dict:
        return {
            "order_id": self.order_id,
            "status": self.status,
            "line_items": [item.model_dump(mode="json") for item in self.line_items],
            "data": thaw(self.data),
        }
