"""Configuration manager for deskentry. Persists settings to ~/.config/deskentry/settings.json."""

import copy
import json
from pathlib import Path
from typing import Any

CONFIG_DIR = Path.home() / ".config" / "deskentry"
SETTINGS_FILE = CONFIG_DIR / "settings.json"
CACHE_DIR = Path.home() / ".cache" / "deskentry"

DEFAULTS: dict[str, Any] = {
    "show_id": False,
    "show_name": True,
    "show_path": True,
    "delimiter": "\t",
    "null_delimiter": False,
    "null": False,
    "json": False,
    "strict": False,
    "data_dirs": [],
}


class Config:
    """Singleton settings manager with JSON persistence."""

    _instance: "Config | None" = None

    def __new__(cls) -> "Config":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._loaded = False
        return cls._instance

    def __init__(self) -> None:
        if self._loaded:
            return
        self._data: dict[str, Any] = copy.deepcopy(DEFAULTS)
        self._load()
        self._loaded = True

    def _load(self) -> None:
        if SETTINGS_FILE.exists():
            try:
                with open(SETTINGS_FILE, "r", encoding="utf-8") as f:
                    saved = json.load(f)
                if isinstance(saved, dict):
                    self._data.update(saved)
            except (json.JSONDecodeError, OSError):
                pass

    def save(self) -> None:
        try:
            CONFIG_DIR.mkdir(parents=True, exist_ok=True)
            with open(SETTINGS_FILE, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2)
        except OSError:
            pass

    def get(self, key: str) -> Any:
        return self._data.get(key, DEFAULTS.get(key))

    def update(self, values: dict[str, Any]) -> None:
        """Merge known settings into the saved defaults."""
        self._data.update({k: v for k, v in values.items() if k in DEFAULTS})
        self.save()

    def reset(self) -> None:
        self._data = copy.deepcopy(DEFAULTS)
        self.save()
