"""Shared entities: order, volume value, units."""

from entity.order import Order, OrderLineItem
from entity.units import LengthUnit, VolumeUnit, parse_length_unit
from entity.volume import Volume, volume_to_dict

__all__ = [
    "LengthUnit",
    "Order",
    "OrderLineItem",
    "Volume",
    "VolumeUnit",
    "parse_length_unit",
    "volume_to_dict",
]
