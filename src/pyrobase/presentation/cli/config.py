"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict

_DEFAULT_TICK_MS = 50
_MIN_TICK_MS = 10
_DEFAULT_SHOW_MENU = True


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    override = os.environ.get("PYROBASE_HOME")
    if override:
        return Path(override)
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "Pyrobase"
        return Path.home() / "Pyrobase"
    return Path.home() / ".config" / "pyrobase"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def get_save_path() -> Path:
    """Return the single JSON file that holds every save slot."""
    return get_user_data_dir() / "saves.json"


def get_log_path() -> Path:
    return get_user_data_dir() / "pyrobase.log"


def default_config() -> Dict[str, Any]:
    return {"tick_ms": _DEFAULT_TICK_MS, "show_menu": _DEFAULT_SHOW_MENU}


def _normalize_tick_ms(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return _DEFAULT_TICK_MS
    return max(_MIN_TICK_MS, value)


def _normalize_show_menu(value: object) -> bool:
    return value if isinstance(value, bool) else _DEFAULT_SHOW_MENU


def load_config(path: Path | None = None) -> Dict[str, Any]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return default_config()
    except Exception:
        return default_config()
    if not isinstance(raw, dict):
        return default_config()
    return {
        "tick_ms": _normalize_tick_ms(raw.get("tick_ms")),
        "show_menu": _normalize_show_menu(raw.get("show_menu")),
    }

