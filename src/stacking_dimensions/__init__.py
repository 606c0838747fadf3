"""
Order-volume extension point.

Extensions are plain callables (volume, order, unit) -> volume, registered
explicitly and run in order by the dispatcher:

  base      - OrderVolumeExtension protocol
  registry  - OrderVolumeRegistry; register via register_order_volume_extension
  dispatch  - OrderVolumeDispatcher, alter_order_volume (on_error policy from config)
  host      - determine_order_volume, volume_or_zero
"""

from stacking_dimensions.base import OrderVolumeExtension
from stacking_dimensions.dispatch import OrderVolumeDispatcher, alter_order_volume, coerce_volume
from stacking_dimensions.errors import (
    DuplicateExtensionError,
    ExtensionFailedError,
    HookError,
    InvalidVolumeError,
    UnknownExtensionError,
)
from stacking_dimensions.host import determine_order_volume, volume_or_zero
from stacking_dimensions.registry import (
    OrderVolumeRegistry,
    get_order_volume_registry,
    register_order_volume_extension,
    unregister_order_volume_extension,
)

__all__ = [
    "OrderVolumeExtension",
    "OrderVolumeRegistry",
    "OrderVolumeDispatcher",
    "alter_order_volume",
    "coerce_volume",
    "determine_order_volume",
    "volume_or_zero",
    "get_order_volume_registry",
    "register_order_volume_extension",
    "unregister_order_volume_extension",
    "HookError",
    "DuplicateExtensionError",
    "UnknownExtensionError",
    "InvalidVolumeError",
    "ExtensionFailedError",
]
