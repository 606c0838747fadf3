"""
Stacking Dimensions - order volume hook runner

Loads an order from JSON, registers the given extensions in order, runs the
order-volume alteration hook and prints the resulting volume (or null when
absent).

Usage:
    python src/app.py --order resources/order.json --unit cm
    python src/app.py --order order.json --unit in --volume 120 --extension my_ext:pad_volume
    python src/app.py --order order.json --extension a:first --extension b:second --on-error abort
"""

import argparse
import importlib
import json
import logging
import os
import sys
from typing import Callable, List, Optional

# Add parent directory to path for imports
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), ".")))

from commons.config import get_setting
from commons.constants import Constants as Co
from commons.io import LocalFileReader, LocalFileWriter
from commons.log import setup_logging
from entity.order import Order
from entity.units import parse_length_unit
from entity.volume import Volume, volume_to_dict
from stacking_dimensions import HookError, OrderVolumeRegistry, determine_order_volume

logger = logging.getLogger(__name__)


def load_extension(spec: str) -> Callable:
    """Import 'package.module:attribute' and return the callable it names."""
    module_name, sep, attr = spec.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Extension must look like 'module:callable', got {spec!r}")
    module = importlib.import_module(module_name)
    target = module
    for part in attr.split("."):
        target = getattr(target, part)
    if not callable(target):
        raise ValueError(f"Extension {spec!r} is not callable")
    return target


def build_registry(specs: List[str]) -> OrderVolumeRegistry:
    registry = OrderVolumeRegistry()
    for spec in specs:
        registry.register(load_extension(spec), name=spec)
    return registry


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the order volume alteration hook for one order.")
    parser.add_argument("--order", required=True, help="Path to order JSON")
    parser.add_argument("--unit", default=None, help="Length unit (mm, cm, m, in, ft); default from config")
    parser.add_argument("--volume", type=float, default=None, help="Starting volume in the cube of --unit")
    parser.add_argument(
        "--extension",
        action="append",
        default=[],
        metavar="MODULE:CALLABLE",
        help="Extension to register; repeat to register several, run in the given order",
    )
    parser.add_argument("--on-error", choices=Co.ON_ERROR_POLICIES, default=None)
    parser.add_argument("--output", default=None, help="Also write the result JSON to this path")
    parser.add_argument("--log-level", default=None)
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> dict:
    unit = parse_length_unit(args.unit or get_setting(Co.DEFAULT_UNIT_KEY, "cm"))
    order = Order.model_validate(LocalFileReader().read_json(args.order))
    base = Volume(volume=args.volume, unit=unit.cubic) if args.volume is not None else None

    registry = build_registry(args.extension)
    logger.info("Running %d extension(s) for order %s", len(registry), order.order_id)
    volume = determine_order_volume(order, unit, base_volume=base, registry=registry, on_error=args.on_error)

    result = {"order_id": order.order_id, "volume": volume_to_dict(volume)}
    if args.output:
        LocalFileWriter().write_json(result, args.output)
    return result


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(level=args.log_level)
    try:
        result = run(args)
    except (HookError, ValueError, FileNotFoundError, ImportError, AttributeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(json.dumps(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
