"""
Extendible commons package.

Subpackages:
  config   - ConfigProvider, YamlConfigProvider, EnvConfigProvider; add vault/remote by implementing ConfigProvider
  io       - FileReader, FileWriter; add S3 etc. by implementing these

Public API: config, load_config, get_setting, setup_logging, Constants.
"""

from commons.config import config, get_setting, load_config
from commons.constants import Constants
from commons.log import setup_logging

__all__ = [
    "config",
    "get_setting",
    "load_config",
    "Constants",
    "setup_logging",
]
