"""
Dispatch the order-volume alteration hook.

Extensions run in registry order; each receives the value returned by the
previous one (last writer wins). What happens when an extension fails is the
dispatcher's on_error policy:

  continue  log a warning, keep the value from before the failing extension, go on
  abort     raise ExtensionFailedError naming the extension

The policy defaults to config key hooks.order_volume.on_error.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from pydantic import ValidationError

from commons.config import get_setting
from commons.constants import Constants as Co
from entity.order import Order
from entity.units import LengthUnit, parse_length_unit
from entity.volume import Volume
from stacking_dimensions.errors import ExtensionFailedError, InvalidVolumeError
from stacking_dimensions.registry import OrderVolumeRegistry, get_order_volume_registry

logger = logging.getLogger(__name__)


def _resolve_policy(on_error: Optional[str]) -> str:
    policy = (on_error or get_setting(Co.ON_ERROR_KEY, Co.ON_ERROR_CONTINUE) or "").strip().lower()
    if policy not in Co.ON_ERROR_POLICIES:
        raise ValueError(f"on_error must be one of {Co.ON_ERROR_POLICIES}, got {policy!r}")
    return policy


def coerce_volume(value: Any, unit: LengthUnit) -> Optional[Volume]:
    """
    Check a volume value against the requested unit. Accepts None (absent), a Volume,
    or the dict form {'volume': .., 'unit': ..}. Raises InvalidVolumeError otherwise.
    """
    if value is None:
        return None
    if isinstance(value, dict):
        try:
            value = Volume.from_dict(value)
        except ValidationError as e:
            raise InvalidVolumeError(f"Malformed volume value: {e}") from e
        if value is None:
            return None
    if not isinstance(value, Volume):
        raise InvalidVolumeError(f"Expected Volume or None, got {type(value).__name__}")
    if not value.matches(unit):
        raise InvalidVolumeError(
            f"Volume unit {value.unit.value} does not match {unit.cubic.value} for unit {unit.value}"
        )
    return value


class OrderVolumeDispatcher:
    """Runs every registered extension over one (volume, order, unit) triple."""

    def __init__(self, registry: Optional[OrderVolumeRegistry] = None, on_error: Optional[str] = None):
        self.registry = registry if registry is not None else get_order_volume_registry()
        self.on_error = _resolve_policy(on_error)

    def dispatch(
        self,
        volume: Optional[Volume],
        order: Order,
        unit: LengthUnit | str,
    ) -> Optional[Volume]:
        unit = parse_length_unit(unit)
        # A bad starting value is a host bug, not an extension failure
        current = coerce_volume(volume, unit)

        for entry in self.registry.entries():
            logger.debug("Running order volume extension %s for order %s", entry.name, order.order_id)
            try:
                result = coerce_volume(entry.callback(current, order, unit), unit)
            except Exception as e:
                if self.on_error == Co.ON_ERROR_ABORT:
                    raise ExtensionFailedError(entry.name, e) from e
                logger.warning(
                    "Order volume extension %s failed for order %s, keeping previous value: %s",
                    entry.name,
                    order.order_id,
                    e,
                )
                continue
            if result != current:
                logger.info(
                    "Extension %s altered volume of order %s: %s -> %s",
                    entry.name,
                    order.order_id,
                    _fmt(current),
                    _fmt(result),
                )
            current = result
        return current


def _fmt(volume: Optional[Volume]) -> str:
    return "absent" if volume is None else f"{volume.volume:g} {volume.unit.value}"


def alter_order_volume(
    volume: Optional[Volume],
    order: Order,
    unit: LengthUnit | str,
    registry: Optional[OrderVolumeRegistry] = None,
    on_error: Optional[str] = None,
) -> Optional[Volume]:
    """Run the hook with the default registry and configured error policy."""
    return OrderVolumeDispatcher(registry=registry, on_error=on_error).dispatch(volume, order, unit)
