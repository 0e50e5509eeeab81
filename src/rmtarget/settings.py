"""Read-only JSON settings store."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from rmtarget.utils import xdg_config_home

log = logging.getLogger(__name__)

_SETTINGS_DIR = "rmtarget"
_SETTINGS_FILE = "settings.json"

DEFAULT_MANIFEST = "Cargo.toml"
DEFAULT_TARGET_DIR = "target"
DEFAULT_SORT = "size"


class Settings:
    """User settings backed by a JSON file.

    Uses dot-notation keys for nested access:
        settings.get("scan.manifest")  # reads data["scan"]["manifest"]
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or (xdg_config_home() / _SETTINGS_DIR / _SETTINGS_FILE)
        self._data: dict[str, Any] = {}
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key."""
        parts = key.split(".")
        node: Any = self._data
        for part in parts:
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    @property
    def manifest(self) -> str:
        return self._get_str("scan.manifest", DEFAULT_MANIFEST)

    @property
    def target_dir(self) -> str:
        return self._get_str("scan.target_dir", DEFAULT_TARGET_DIR)

    @property
    def sort(self) -> str:
        return self._get_str("sort.default", DEFAULT_SORT)

    def _get_str(self, key: str, default: str) -> str:
        value = self.get(key, default)
        if not isinstance(value, str) or not value:
            log.warning("Ignoring invalid value for '%s' in %s: %r", key, self._path, value)
            return default
        return value

    def _load(self) -> None:
        """Load settings from disk, gracefully handling errors."""
        if not self._path.exists():
            return
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            log.warning("Could not load settings from %s: %s", self._path, e)
            return
        if not isinstance(data, dict):
            log.warning("Could not load settings from %s: top level is not an object", self._path)
            return
        self._data = data
