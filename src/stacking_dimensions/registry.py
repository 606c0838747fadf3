"""Ordered registry of order-volume extensions. Register explicitly; nothing is auto-discovered."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional

from stacking_dimensions.base import OrderVolumeExtension
from stacking_dimensions.errors import DuplicateExtensionError, UnknownExtensionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegisteredExtension:
    name: str
    weight: int
    callback: OrderVolumeExtension
    seq: int  # registration position, breaks weight ties


def _default_name(callback: Callable) -> str:
    module = getattr(callback, "__module__", None) or ""
    qualname = getattr(callback, "__qualname__", None) or type(callback).__qualname__
    return f"{module}.{qualname}" if module else qualname


class OrderVolumeRegistry:
    """
    Holds extensions in invocation order: ascending weight, then registration order.
    With the default weight of 0 everywhere this is plain registration order.
    """

    def __init__(self):
        self._entries: List[RegisteredExtension] = []
        self._seq = 0

    def register(
        self,
        callback: OrderVolumeExtension,
        name: Optional[str] = None,
        weight: int = 0,
    ) -> OrderVolumeExtension:
        if not callable(callback):
            raise TypeError(f"Extension must be callable, got {type(callback).__name__}")
        if name is None:
            name = _default_name(callback)
            # closures and lambdas share a qualname; keep automatic names unique
            if name in self:
                name = f"{name}#{self._seq}"
        elif name in self:
            raise DuplicateExtensionError(name)
        self._entries.append(RegisteredExtension(name, weight, callback, self._seq))
        self._seq += 1
        logger.debug("Registered order volume extension %s (weight=%d)", name, weight)
        return callback

    def unregister(self, name: str) -> None:
        for i, entry in enumerate(self._entries):
            if entry.name == name:
                del self._entries[i]
                logger.debug("Unregistered order volume extension %s", name)
                return
        raise UnknownExtensionError(name)

    def entries(self) -> List[RegisteredExtension]:
        return sorted(self._entries, key=lambda e: (e.weight, e.seq))

    def extensions(self) -> List[OrderVolumeExtension]:
        return [e.callback for e in self.entries()]

    def names(self) -> List[str]:
        return [e.name for e in self.entries()]

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return any(e.name == name for e in self._entries)

    def __iter__(self) -> Iterator[RegisteredExtension]:
        return iter(self.entries())


_default_registry = OrderVolumeRegistry()


def get_order_volume_registry() -> OrderVolumeRegistry:
    """Return the process-wide registry used by alter_order_volume."""
    return _default_registry


def register_order_volume_extension(
    callback: OrderVolumeExtension | None = None,
    *,
    name: Optional[str] = None,
    weight: int = 0,
    registry: Optional[OrderVolumeRegistry] = None,
):
    """
    Register an extension. Call directly, or use as a decorator:

        @register_order_volume_extension(weight=10)
        def pad_volume(volume, order, unit): ...
    """
    target = registry if registry is not None else _default_registry

    def _register(fn: OrderVolumeExtension) -> OrderVolumeExtension:
        return target.register(fn, name=name, weight=weight)

    if callback is None:
        return _register
    return _register(callback)


def unregister_order_volume_extension(name: str, registry: Optional[OrderVolumeRegistry] = None) -> None:
    (registry if registry is not None else _default_registry).unregister(name)
