"""Per-user settings stored as JSON in the application data directory."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)

APP_NAME = "Pagesmith"

DEFAULTS: Dict[str, str] = {
    "template_name": "default.html",
    "last_open_dir": "",
    "last_save_dir": "",
}


def app_data_dir() -> Path:
    """Return the platform-specific application data directory."""
    override = os.getenv("PAGESMITH_HOME")
    if override:
        target = Path(override).expanduser()
    elif os.name == "nt":
        target = Path(os.getenv("LOCALAPPDATA", Path.home())) / APP_NAME
    else:
        target = Path.home() / ".local" / "share" / APP_NAME
    target.mkdir(parents=True, exist_ok=True)
    return target


class SettingsManager:
    """Very small settings helper storing JSON data."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path is not None else app_data_dir() / "settings.json"
        self._settings: Dict[str, str] = {}
        self.load()

    def load(self) -> None:
        self._settings = {}
        if self.path.exists():
            try:
                data = json.loads(self.path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as exc:
                logger.warning("Ignoring unreadable settings file %s: %s", self.path, exc)
            else:
                if isinstance(data, dict):
                    self._settings = {str(k): str(v) for k, v in data.items()}

        changed = False
        for key, value in DEFAULTS.items():
            if self._settings.get(key, "") == "" and value:
                self._settings[key] = value
                changed = True
            self._settings.setdefault(key, value)

        if changed:
            try:
                self.save()
            except OSError as exc:
                logger.warning("Could not save settings to %s: %s", self.path, exc)

    def save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._settings, indent=2), encoding="utf-8")

    def get(self, key: str, default: str = "") -> str:
        return self._settings.get(key, default)

    def set(self, key: str, value: str) -> None:
        self._settings[key] = value
        self.save()

    @property
    def template_name(self) -> str:
        return self.get("template_name") or DEFAULTS["template_name"]
