"""Extendible config loading. Add new providers (env, vault, etc.) by implementing ConfigProvider."""

from commons.config.loader import (
    ConfigProvider,
    EnvConfigProvider,
    YamlConfigProvider,
    get_config,
    get_dotted,
)

_config_instance = None


def load_config(path=None, reload=False):
    """Load config once; optional path for tests or overrides."""
    global _config_instance
    if _config_instance is None or reload:
        base = YamlConfigProvider(path=path)
        _config_instance = EnvConfigProvider(base=base).load()
    return _config_instance


def get_setting(dotted: str, default=None):
    """Read a dotted key (e.g. 'hooks.order_volume.on_error') from the loaded config."""
    return get_dotted(load_config(), dotted, default)


config = load_config()

__all__ = [
    "ConfigProvider",
    "EnvConfigProvider",
    "YamlConfigProvider",
    "get_config",
    "get_dotted",
    "get_setting",
    "load_config",
    "config",
]
