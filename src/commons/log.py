"""Logging setup from config (logging.level, logging.format)."""

import logging
from typing import Optional

from commons.config import get_setting

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """Configure the root logger. Explicit arguments win over config values."""
    level_name = (level or get_setting("logging.level", "INFO") or "INFO").upper()
    fmt = fmt or get_setting("logging.format", DEFAULT_FORMAT) or DEFAULT_FORMAT
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=fmt)
