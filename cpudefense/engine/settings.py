"""settings.json loading shared by the logger and the entry point."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

DEFAULT_SETTINGS: Dict[str, Any] = {
    "logLevel": "INFO",
    "logChannels": {},
    "saveFile": "heroes.json",
}


def load_settings(settings_path: Path) -> Dict[str, Any]:
    """Return the settings dictionary, falling back to defaults."""

    settings = dict(DEFAULT_SETTINGS)
    if not settings_path.exists():
        return settings
    try:
        data = json.loads(settings_path.read_text())
    except json.JSONDecodeError:
        return settings
    if isinstance(data, dict):
        settings.update(data)
    return settings


def save_path(settings: Dict[str, Any], root: Path = Path(".")) -> Path:
    return root / str(settings.get("saveFile") or DEFAULT_SETTINGS["saveFile"])


__all__ = ["DEFAULT_SETTINGS", "load_settings", "save_path"]
