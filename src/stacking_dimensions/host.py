"""Host-side entry: determine the final volume of an order after extensions ran."""

from typing import Optional

from entity.order import Order
from entity.units import LengthUnit, parse_length_unit
from entity.volume import Volume
from stacking_dimensions.dispatch import alter_order_volume
from stacking_dimensions.registry import OrderVolumeRegistry


def determine_order_volume(
    order: Order,
    unit: LengthUnit | str,
    base_volume: Optional[Volume] = None,
    registry: Optional[OrderVolumeRegistry] = None,
    on_error: Optional[str] = None,
) -> Optional[Volume]:
    """
    Start from base_volume (absent unless the host computed one) and let the
    registered extensions alter it. Returns None when no volume could be determined.
    """
    unit = parse_length_unit(unit)
    return alter_order_volume(base_volume, order, unit, registry=registry, on_error=on_error)


def volume_or_zero(volume: Optional[Volume], unit: LengthUnit | str) -> Volume:
    """Downstream policy for callers that treat an absent volume as zero."""
    if volume is not None:
        return volume
    return Volume(volume=0.0, unit=parse_length_unit(unit).cubic)
