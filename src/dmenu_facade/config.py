"""YAML-based configuration for dmenu-facade.

Settings live in ~/.config/dmenu-facade/config.yaml (honouring
XDG_CONFIG_HOME). The "menu" table seeds DMenu.from_config; anything not set
there keeps the tool's own default.
"""

from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG: dict[str, Any] = {
    "debug": False,
    "menu": {
        "program": "dmenu",
        "position": "top",
        "case_insensitive": False,
        "lines": None,
        "monitor": None,
        "prompt": None,
        "font": None,
        "colors": {
            "normal_background": None,
            "normal_foreground": None,
            "selected_background": None,
            "selected_foreground": None,
        },
        "window_id": None,
        "grab_keyboard": False,
        "extra_args": [],
    },
}


def get_config_dir() -> Path:
    """Get the dmenu-facade config directory."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(xdg_config) / "dmenu-facade"


def get_config_path() -> Path:
    """Get the path to the config file."""
    return get_config_dir() / "config.yaml"


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load the config file merged over DEFAULT_CONFIG.

    A missing, unreadable or malformed file yields the defaults.
    """
    config_path = path or get_config_path()
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
        if not isinstance(data, dict):
            return copy.deepcopy(DEFAULT_CONFIG)
        return _deep_merge(copy.deepcopy(DEFAULT_CONFIG), data)
    except FileNotFoundError:
        return copy.deepcopy(DEFAULT_CONFIG)
    except (yaml.YAMLError, OSError):
        return copy.deepcopy(DEFAULT_CONFIG)


def save_config(cfg: dict[str, Any], path: Path | None = None) -> None:
    """Save the config file."""
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        yaml.safe_dump(cfg, f, default_flow_style=False, sort_keys=False)


def is_debug_enabled(cfg: dict[str, Any] | None = None) -> bool:
    """Check if debug mode is enabled."""
    if cfg is None:
        cfg = load_config()
    return bool(cfg.get("debug", False))
