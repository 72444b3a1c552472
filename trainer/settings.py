from __future__ import annotations

"""Utility functions for loading and saving user settings.

The settings are stored as a list of dictionaries to preserve order.
Each dictionary contains ``key``, ``value`` and ``type`` entries.
"""

from pathlib import Path
import json
import logging
from typing import Any, List, Dict

from trainer import DEFAULT_RPE
from trainer.utils import to_int

# Path to the JSON file where settings are persisted.
SETTINGS_PATH = Path(__file__).resolve().parents[1] / "data" / "settings.json"

# Default settings to initialize the file on first run.
DEFAULT_SETTINGS: List[Dict[str, Any]] = [
    {"key": "default_rpe", "value": DEFAULT_RPE, "type": "int"},
    {"key": "suggestion_preview_limit", "value": 6, "type": "int"},
    {"key": "history_limit", "value": 50, "type": "int"},
]

# Internal cache so settings are only read from disk once.
_settings_cache: List[Dict[str, Any]] | None = None


def load_settings(path: Path | None = None) -> List[Dict[str, Any]]:
    """Load settings from :data:`SETTINGS_PATH` or create defaults."""
    path = Path(path or SETTINGS_PATH)
    if path.exists():
        try:
            with path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
                if isinstance(data, list):
                    return data
        except (OSError, ValueError):
            logging.warning("Settings file %s unreadable, restoring defaults", path)
    try:
        save_settings(DEFAULT_SETTINGS, path)
    except OSError:
        logging.exception("Could not write default settings to %s", path)
    return [dict(item) for item in DEFAULT_SETTINGS]


def save_settings(settings: List[Dict[str, Any]], path: Path | None = None) -> None:
    """Persist ``settings`` to :data:`SETTINGS_PATH`."""
    path = Path(path or SETTINGS_PATH)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as fh:
        json.dump(settings, fh)


def get_settings() -> List[Dict[str, Any]]:
    """Return the cached settings list, loading from disk if needed."""
    global _settings_cache
    if _settings_cache is None:
        _settings_cache = load_settings()
    return _settings_cache


def reset_cache() -> None:
    """Forget cached settings so the next access reads the file again."""
    global _settings_cache
    _settings_cache = None


def get_value(key: str, default: Any = None) -> Any:
    """Fetch the value associated with ``key``."""
    for item in get_settings():
        if item.get("key") == key:
            return item.get("value")
    for item in DEFAULT_SETTINGS:
        if item["key"] == key:
            return item["value"]
    return default


def get_int(key: str) -> int:
    """Fetch ``key`` as an integer, using the built-in default for bad values."""
    default = next((item["value"] for item in DEFAULT_SETTINGS if item["key"] == key), 0)
    return to_int(get_value(key, default), default)


def set_value(key: str, value: Any) -> None:
    """Update ``key`` with ``value`` and persist the change."""
    settings = get_settings()
    for item in settings:
        if item.get("key") == key:
            item["value"] = value
            break
    else:
        settings.append({"key": key, "value": value, "type": type(value).__name__})
    save_settings(settings)
