"""Tests for stacking_dimensions.host and logging setup."""

import logging

import pytest

from commons import log as log_module
from entity.units import LengthUnit, VolumeUnit
from entity.volume import Volume
from stacking_dimensions.host import determine_order_volume, volume_or_zero


def test_determine_without_base_or_extensions_is_absent(registry, order):
    assert determine_order_volume(order, "cm", registry=registry) is None


def test_determine_threads_base_volume(registry, order):
    registry.register(lambda volume, order, unit: Volume(volume=volume.volume + 1, unit=volume.unit))
    base = Volume(volume=4, unit=VolumeUnit.CUBIC_FOOT)
    result = determine_order_volume(order, "feet", base_volume=base, registry=registry)
    assert result == Volume(volume=5, unit=VolumeUnit.CUBIC_FOOT)


def test_determine_rejects_unknown_unit(registry, order):
    with pytest.raises(ValueError):
        determine_order_volume(order, "parsec", registry=registry)


def test_volume_or_zero():
    assert volume_or_zero(None, "m") == Volume(volume=0, unit=VolumeUnit.CUBIC_METER)
    v = Volume(volume=3, unit=VolumeUnit.CUBIC_INCH)
    assert volume_or_zero(v, LengthUnit.INCH) is v


def test_setup_logging_uses_config_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(log_module.logging, "basicConfig", lambda **kw: calls.update(kw))
    log_module.setup_logging()
    assert calls["level"] == logging.INFO
    log_module.setup_logging(level="debug", fmt="%(message)s")
    assert calls["level"] == logging.DEBUG
    assert calls["format"] == "%(message)s"
