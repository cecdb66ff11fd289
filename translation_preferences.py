"""Persisted user preferences for gtxtranslate."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


PREFERENCES_FILE = Path.home() / ".gtxtranslate_preferences.json"

DEFAULT_PREFERENCES = {
    "source_language": "auto",
    "dest_language": "vi",
    "timeout": 5.0,
    "max_workers": 4,
}


@dataclass
class TranslatorPreferences:
    source_language: str = DEFAULT_PREFERENCES["source_language"]
    dest_language: str = DEFAULT_PREFERENCES["dest_language"]
    timeout: float = DEFAULT_PREFERENCES["timeout"]
    max_workers: int = DEFAULT_PREFERENCES["max_workers"]


def _preferences_path(path: Optional[Path]) -> Path:
    return Path(path) if path is not None else PREFERENCES_FILE


def _read_preferences(path: Optional[Path] = None) -> dict:
    try:
        data = json.loads(_preferences_path(path).read_text(encoding="utf-8"))
    except (FileNotFoundError, json.JSONDecodeError, OSError):
        return {}
    return data if isinstance(data, dict) else {}


def _write_preferences(preferences: dict, path: Optional[Path] = None) -> None:
    target = _preferences_path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(preferences, indent=2, ensure_ascii=False), encoding="utf-8")
    except OSError:
        pass


def load_preferences(path: Optional[Path] = None) -> TranslatorPreferences:
    """Load preferences, replacing every missing or invalid value with its default."""

    data = _read_preferences(path)
    result = TranslatorPreferences()

    for key in ("source_language", "dest_language"):
        value = data.get(key)
        if isinstance(value, str) and value.strip():
            setattr(result, key, value.strip())

    timeout = data.get("timeout")
    if isinstance(timeout, (int, float)) and not isinstance(timeout, bool) and timeout > 0:
        result.timeout = float(timeout)

    max_workers = data.get("max_workers")
    if isinstance(max_workers, int) and not isinstance(max_workers, bool) and max_workers >= 1:
        result.max_workers = max_workers

    return result


def save_dest_language(dest: str, path: Optional[Path] = None) -> None:
    data = _read_preferences(path)
    data["dest_language"] = dest
    _write_preferences(data, path)
