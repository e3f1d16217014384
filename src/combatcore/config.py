"""Configuration helpers for locating definitions and logging."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict

_DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "combatcore"
        return Path.home() / "combatcore"
    return Path.home() / ".config" / "combatcore"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def _normalize_log_level(value: object) -> str:
    if isinstance(value, str) and value.upper() in _LOG_LEVELS:
        return value.upper()
    return _DEFAULT_LOG_LEVEL


def _normalize_definitions_path(value: object) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _defaults() -> Dict[str, str | None]:
    return {"definitions_path": None, "log_level": _DEFAULT_LOG_LEVEL}


def load_config(path: Path | None = None) -> Dict[str, str | None]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return _defaults()
    if not isinstance(raw, dict):
        return _defaults()
    return {
        "definitions_path": _normalize_definitions_path(raw.get("definitions_path")),
        "log_level": _normalize_log_level(raw.get("log_level")),
    }


def save_config(config: Dict[str, str | None], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "definitions_path": _normalize_definitions_path(config.get("definitions_path")),
        "log_level": _normalize_log_level(config.get("log_level")),
    }
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
