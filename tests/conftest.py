"""Pytest fixtures and configuration. Run from project root with: PYTHONPATH=src pytest tests/ -v"""

import os
import sys
from pathlib import Path

import pytest

# src for commons.*, entity.*, stacking_dimensions.*; project root for tests.fixtures.*
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC = PROJECT_ROOT / "src"
for p in (SRC, PROJECT_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

os.chdir(PROJECT_ROOT)

from entity.order import Order, OrderLineItem  # noqa: E402
from entity.units import LengthUnit  # noqa: E402
from stacking_dimensions.registry import OrderVolumeRegistry  # noqa: E402


@pytest.fixture
def registry():
    """Fresh registry so tests never share extensions."""
    return OrderVolumeRegistry()


@pytest.fixture
def order():
    return Order(
        order_id="1001",
        status="checkout_shipping",
        line_items=(
            OrderLineItem(sku="BOX-S", quantity=2, length=10, width=10, height=5, dimension_unit=LengthUnit.CENTIMETER),
            OrderLineItem(sku="GIFT-CARD", quantity=1),
        ),
        data={"shipping_service": "ground"},
    )


@pytest.fixture(autouse=True)
def _default_policy_continue(monkeypatch):
    """Pin the configured error policy so a developer .env cannot change test outcomes."""
    monkeypatch.setattr(
        "stacking_dimensions.dispatch.get_setting",
        lambda key, default=None: "continue" if key == "hooks.order_volume.on_error" else default,
    )
