"""Picker configuration and package-wide constants."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag
from typing import Any, Mapping

from .errors import SettingsInvalidError

# Settings keys that hold the cached camera-roll reference.
CAMERA_ALBUM_IDENTIFIER_KEY = "camera_album.identifier"
CAMERA_ALBUM_IDENTIFIER_TYPE_KEY = "camera_album.identifier_type"
CAMERA_ALBUM_LANGUAGE_KEY = "camera_album.language"

# Section of the settings file that stores the picker configuration.
PICKER_SETTINGS_SECTION = "picker"

IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".heic", ".heif", ".tif", ".tiff", ".webp"})
GIF_EXTENSIONS = frozenset({".gif"})
VIDEO_EXTENSIONS = frozenset({".mov", ".mp4", ".m4v"})

HIDDEN_DIR_NAME = ".hidden"
TRASH_DIR_NAME = ".trash"


class PickerAssetOptions(IntFlag):
    """Media types the picker is allowed to select."""

    PHOTO = 1 << 0
    VIDEO = 1 << 1
    GIF_PHOTO = 1 << 2
    LIVE_PHOTO = 1 << 3

    @property
    def is_photo(self) -> bool:
        return bool(self & (PickerAssetOptions.PHOTO | PickerAssetOptions.GIF_PHOTO | PickerAssetOptions.LIVE_PHOTO))

    @property
    def is_video(self) -> bool:
        return bool(self & PickerAssetOptions.VIDEO)

    @classmethod
    def parse(cls, value: Any) -> "PickerAssetOptions":
        """Coerce *value* (an int or a list of option names) into options."""

        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise SettingsInvalidError(f"Invalid select options: {value!r}")
        if isinstance(value, int):
            if value < 0 or value & ~int(cls.PHOTO | cls.VIDEO | cls.GIF_PHOTO | cls.LIVE_PHOTO):
                raise SettingsInvalidError(f"Unknown select option bits: {value!r}")
            return cls(value)
        if isinstance(value, str):
            value = [part for part in value.replace("|", ",").split(",") if part.strip()]
        if isinstance(value, (list, tuple)):
            result = cls(0)
            for name in value:
                key = str(name).strip().upper()
                try:
                    result |= cls[key]
                except KeyError as exc:
                    raise SettingsInvalidError(f"Unknown select option: {name!r}") from exc
            return result
        raise SettingsInvalidError(f"Invalid select options: {value!r}")


DEFAULT_SELECT_OPTIONS = PickerAssetOptions.PHOTO | PickerAssetOptions.VIDEO


def _coerce_bool(value: Any, name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    if isinstance(value, int):
        return bool(value)
    raise SettingsInvalidError(f"Invalid boolean for {name!r}: {value!r}")


@dataclass(frozen=True)
class PickerConfiguration:
    """Policy supplied by the picker; never mutated by the album helpers."""

    allow_load_photo_library: bool = True
    creation_date: bool = False
    select_options: PickerAssetOptions = field(default=DEFAULT_SELECT_OPTIONS)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "PickerConfiguration":
        """Build a configuration from a settings section.

        Missing keys fall back to the defaults; malformed values raise
        :class:`SettingsInvalidError`.
        """

        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise SettingsInvalidError(f"Picker settings must be a mapping, got {type(data).__name__}")
        kwargs: dict[str, Any] = {}
        if "allow_load_photo_library" in data:
            kwargs["allow_load_photo_library"] = _coerce_bool(
                data["allow_load_photo_library"], "allow_load_photo_library"
            )
        if "creation_date" in data:
            kwargs["creation_date"] = _coerce_bool(data["creation_date"], "creation_date")
        if "select_options" in data:
            kwargs["select_options"] = PickerAssetOptions.parse(data["select_options"])
        return cls(**kwargs)

    def to_mapping(self) -> dict[str, Any]:
        return {
            "allow_load_photo_library": self.allow_load_photo_library,
            "creation_date": self.creation_date,
            "select_options": int(self.select_options),
        }
