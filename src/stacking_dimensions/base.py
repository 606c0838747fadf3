"""Protocol for order-volume extensions. Implement to alter the volume determined for an order."""

from typing import Optional, Protocol

from entity.order import Order
from entity.units import LengthUnit
from entity.volume import Volume


class OrderVolumeExtension(Protocol):
    """Alter the volume determined for an order."""

    def __call__(self, volume: Optional[Volume], order: Order, unit: LengthUnit) -> Optional[Volume]:
        """
        Return the volume to hand to the next extension.
        volume is None when no volume has been determined yet; return it unchanged
        to decline. order and unit are read-only.
        """
        ...
