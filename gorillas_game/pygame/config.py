"""Persistent configuration helpers for the pygame client."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Tuple

_SETTINGS_PATH = Path(__file__).resolve().parent / "user_settings.json"

DEFAULT_WINDOW_SIZE = (1000, 600)
MIN_WINDOW_SIZE = (320, 240)


def load_user_settings() -> Dict[str, Any]:
    """Load persisted user settings from disk."""
    try:
        with _SETTINGS_PATH.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
            if isinstance(data, dict):
                return data
    except FileNotFoundError:
        return {}
    except json.JSONDecodeError:
        return {}
    except OSError:
        return {}
    return {}


def save_user_settings(settings: Dict[str, Any]) -> None:
    """Persist user settings to disk, ignoring filesystem errors."""
    try:
        _SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
        with _SETTINGS_PATH.open("w", encoding="utf-8") as handle:
            json.dump(settings, handle, indent=2, sort_keys=True)
    except OSError:
        # Persistence errors are non-fatal for gameplay.
        pass


def stored_window_size(settings: Dict[str, Any]) -> Tuple[int, int]:
    """Return the saved window size, falling back to the default."""

    value = settings.get("window_size")
    if (
        isinstance(value, list)
        and len(value) == 2
        and all(isinstance(v, int) for v in value)
    ):
        return (
            max(MIN_WINDOW_SIZE[0], value[0]),
            max(MIN_WINDOW_SIZE[1], value[1]),
        )
    return DEFAULT_WINDOW_SIZE


__all__ = [
    "DEFAULT_WINDOW_SIZE",
    "load_user_settings",
    "save_user_settings",
    "stored_window_size",
]
