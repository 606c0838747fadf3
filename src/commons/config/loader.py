"""Config provider protocol and implementations. Extend by adding new providers."""

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import load_dotenv

# Load .env so environment overrides can live next to the project
_project_root = Path(__file__).resolve().parent.parent.parent.parent
load_dotenv(_project_root / ".env")

# Environment variable -> dotted config key it overrides
ENV_OVERRIDES: Dict[str, str] = {
    "STACKING_HOOK_ON_ERROR": "hooks.order_volume.on_error",
    "STACKING_LOG_LEVEL": "logging.level",
}


class ConfigProvider:
    """Protocol for config sources. Implement to add env, vault, remote, etc."""

    def load(self) -> Dict[str, Any]:
        """Return the full config dict."""
        raise NotImplementedError


class YamlConfigProvider(ConfigProvider):
    """Load config from a YAML file."""

    def __init__(self, path: Optional[Path] = None):
        self.path = path or (
            Path(__file__).resolve().parent.parent.parent / "config" / "config.yaml"
        )

    def load(self) -> Dict[str, Any]:
        with open(self.path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}


class EnvConfigProvider(ConfigProvider):
    """Layer environment overrides on top of another provider's config."""

    def __init__(
        self,
        base: Optional[ConfigProvider] = None,
        environ: Optional[Mapping[str, str]] = None,
        overrides: Optional[Dict[str, str]] = None,
    ):
        self.base = base or YamlConfigProvider()
        self.environ = environ if environ is not None else os.environ
        self.overrides = overrides if overrides is not None else ENV_OVERRIDES

    def load(self) -> Dict[str, Any]:
        cfg = self.base.load()
        for env_name, dotted in self.overrides.items():
            value = self.environ.get(env_name)
            if value:
                set_dotted(cfg, dotted, value)
        return cfg


def get_dotted(cfg: Mapping[str, Any], dotted: str, default: Any = None) -> Any:
    """Read 'a.b.c' from nested dicts; default when any level is missing."""
    node: Any = cfg
    for key in dotted.split("."):
        if not isinstance(node, Mapping) or key not in node:
            return default
        node = node[key]
    return node


def set_dotted(cfg: Dict[str, Any], dotted: str, value: Any) -> None:
    keys = dotted.split(".")
    node = cfg
    for key in keys[:-1]:
        child = node.get(key)
        if not isinstance(child, dict):
            child = {}
            node[key] = child
        node = child
    node[keys[-1]] = value


def get_config(provider: Optional[ConfigProvider] = None) -> Dict[str, Any]:
    """Get config from the given provider, or YAML with environment overrides."""
    if provider is None:
        provider = EnvConfigProvider()
    return provider.load()
