"""JSON file backed key/value settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping

from ..config import PICKER_SETTINGS_SECTION, PickerConfiguration
from ..errors import SettingsInvalidError
from ..utils.jsonio import read_json, write_json
from ..utils.logging import logger


class SettingsManager:
    """Process-wide settings persisted to a single JSON document.

    Keys are flat strings (``"camera_album.identifier"``); values must be JSON
    serialisable. Every mutation is written through to disk atomically, and
    the last writer wins.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._data: Dict[str, Any] = {}
        self.load()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> None:
        """(Re)load the document from disk; a missing file means empty settings."""

        if not self._path.exists():
            self._data = {}
            return
        self._data = read_json(self._path)
        logger.debug("Loaded %d settings from %s", len(self._data), self._path)

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        if key in self._data and self._data[key] == value:
            return
        self._data[key] = value
        self._save()

    def update(self, values: Mapping[str, Any]) -> None:
        """Apply several changes in one write; a ``None`` value removes its key."""

        changed = False
        for key, value in values.items():
            if value is None:
                if key in self._data:
                    del self._data[key]
                    changed = True
            elif key not in self._data or self._data[key] != value:
                self._data[key] = value
                changed = True
        if changed:
            self._save()

    def remove(self, key: str) -> None:
        if key in self._data:
            del self._data[key]
            self._save()

    def section(self, name: str) -> Mapping[str, Any]:
        """Return the mapping stored under *name*, or an empty mapping."""

        value = self._data.get(name)
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise SettingsInvalidError(f"Settings section {name!r} is not an object")
        return value

    def picker_configuration(self) -> PickerConfiguration:
        return PickerConfiguration.from_mapping(self.section(PICKER_SETTINGS_SECTION))

    def _save(self) -> None:
        write_json(self._path, self._data)
