"""Tests for stacking_dimensions.registry."""

import pytest

from stacking_dimensions import registry as registry_module
from stacking_dimensions.errors import DuplicateExtensionError, UnknownExtensionError
from stacking_dimensions.registry import (
    OrderVolumeRegistry,
    get_order_volume_registry,
    register_order_volume_extension,
    unregister_order_volume_extension,
)


def first(volume, order, unit):
    return volume


def second(volume, order, unit):
    return volume


def test_registration_order_is_invocation_order(registry):
    registry.register(second)
    registry.register(first)
    assert registry.extensions() == [second, first]


def test_default_name_is_qualified():
    reg = OrderVolumeRegistry()
    reg.register(first)
    assert reg.names() == ["test_registry.first"]
    assert "test_registry.first" in reg


def test_equal_weights_keep_registration_order(registry):
    registry.register(first, name="a", weight=5)
    registry.register(second, name="b", weight=5)
    registry.register(first, name="c", weight=1)
    assert registry.names() == ["c", "a", "b"]


def test_duplicate_name_raises(registry):
    registry.register(first, name="pad")
    with pytest.raises(DuplicateExtensionError, match="pad"):
        registry.register(second, name="pad")


def test_non_callable_raises(registry):
    with pytest.raises(TypeError, match="callable"):
        registry.register("not a function")


def test_unregister(registry):
    registry.register(first, name="a")
    registry.register(second, name="b")
    registry.unregister("a")
    assert registry.names() == ["b"]
    assert len(registry) == 1


def test_unregister_unknown_raises(registry):
    with pytest.raises(UnknownExtensionError, match="missing"):
        registry.unregister("missing")


def test_clear(registry):
    registry.register(first)
    registry.clear()
    assert len(registry) == 0
    assert registry.extensions() == []


def test_register_as_decorator(registry):
    @register_order_volume_extension(name="decorated", weight=3, registry=registry)
    def pad(volume, order, unit):
        return volume

    assert pad(None, None, None) is None
    assert [(e.name, e.weight) for e in registry] == [("decorated", 3)]


def test_default_registry_helpers(monkeypatch):
    fresh = OrderVolumeRegistry()
    monkeypatch.setattr(registry_module, "_default_registry", fresh)
    assert get_order_volume_registry() is fresh

    register_order_volume_extension(first, name="global")
    assert fresh.names() == ["global"]
    unregister_order_volume_extension("global")
    assert len(fresh) == 0


def test_unnamed_closures_from_one_factory_both_register(registry):
    def make(n):
        def ext(volume, order, unit):
            return volume
        return ext

    a, b = make(1), make(2)
    registry.register(a)
    registry.register(b)
    assert registry.extensions() == [a, b]
    assert len(set(registry.names())) == 2
    assert registry.names()[1].endswith("#1")


def test_unnamed_lambdas_register_and_unregister(registry):
    registry.register(lambda volume, order, unit: volume)
    registry.register(lambda volume, order, unit: None)
    second = registry.names()[1]
    registry.unregister(second)
    assert len(registry) == 1
