"""Configuration management."""

import copy
import logging
import yaml
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "logging": {
        "level": "WARNING",
        "file": "logs/lifetime.log",
    },
    "database": {
        "path": "data/catalog.db",
    },
    "catalog": {
        "demos_config": "demos_config.yaml",
    },
}

_config: Dict[str, Any] = {}
_base_path: Path = None


def load_config(config_path: str = None) -> Dict[str, Any]:
    """Load configuration from YAML file."""
    global _config, _base_path

    if config_path is None:
        # Try to find config in common locations
        possible_paths = [
            Path("config/config.yaml"),
            Path("config.yaml"),
            Path.home() / ".config" / "lifetime" / "config.yaml",
        ]
        for path in possible_paths:
            if path.exists():
                config_path = str(path)
                break
        else:
            logger.warning("No config.yaml found, using built-in defaults")
            _config = copy.deepcopy(DEFAULTS)
            _base_path = Path.cwd()
            _resolve_paths()
            return _config

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    # config/config.yaml lives one level below the project root
    if config_path.parent.name == "config":
        _base_path = config_path.parent.parent
    else:
        _base_path = config_path.parent

    with open(config_path) as f:
        loaded = yaml.safe_load(f) or {}

    _config = _merge(copy.deepcopy(DEFAULTS), loaded)

    # Resolve relative paths
    _resolve_paths()

    return _config


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override into base."""
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def _resolve_paths():
    """Resolve relative paths in config to absolute paths."""
    global _config

    for section, key in (("logging", "file"), ("database", "path"), ("catalog", "demos_config")):
        value = _config.get(section, {}).get(key)
        if not value or value == ":memory:":
            continue
        path = Path(value)
        if not path.is_absolute():
            _config[section][key] = str(_base_path / path)


def get_config() -> Dict[str, Any]:
    """Get the loaded configuration."""
    if not _config:
        load_config()
    return _config


def get(key: str, default: Any = None) -> Any:
    """Get a config value by dot-notation key (e.g., 'logging.level')."""
    if not _config:
        load_config()

    keys = key.split(".")
    value = _config
    for k in keys:
        if isinstance(value, dict) and k in value:
            value = value[k]
        else:
            return default
    return value


def reset_config():
    """Forget the loaded configuration."""
    global _config, _base_path
    _config = {}
    _base_path = None
