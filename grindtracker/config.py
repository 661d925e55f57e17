"""Configuration loading for Grind Tracker.

Settings live in ``~/.config/grindtracker/config.toml``. Anything missing
from the file falls back to :data:`DEFAULTS`.
"""

import copy
import logging
from pathlib import Path
from typing import Optional

import toml

logger = logging.getLogger(__name__)

DEFAULTS: dict = {
    "ledger": {
        "buy_in_ceiling": 10.0,
        "currency": "$",
    },
    "storage": {
        "db_path": "",  # Empty means grindtracker.db in the config directory
    },
}


def config_dir() -> Path:
    return Path.home() / ".config" / "grindtracker"


def config_path() -> Path:
    return config_dir() / "config.toml"


def default_db_path() -> Path:
    return config_dir() / "grindtracker.db"


def _merge(base: dict, override: dict) -> dict:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path: Optional[Path] = None) -> dict:
    """Load configuration merged over the defaults.

    Args:
        path: Config file to read. Defaults to :func:`config_path`.

    Returns:
        Configuration dict. An absent or unreadable file yields the defaults.
    """
    path = path or config_path()
    if not path.exists():
        return copy.deepcopy(DEFAULTS)

    try:
        loaded = toml.load(path)
    except (toml.TomlDecodeError, OSError) as e:
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        return copy.deepcopy(DEFAULTS)
    return _merge(DEFAULTS, loaded)


def resolve_db_path(config: dict) -> Path:
    """Database location from config, with ``~`` expanded."""
    configured = config.get("storage", {}).get("db_path")
    if configured:
        return Path(configured).expanduser()
    return default_db_path()


def write_default_config(path: Optional[Path] = None) -> Path:
    """Write the default configuration template and return its path."""
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        toml.dump(DEFAULTS, f)
    return path
