"""Persisted reference to the camera-roll album."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..config import (
    CAMERA_ALBUM_IDENTIFIER_KEY,
    CAMERA_ALBUM_IDENTIFIER_TYPE_KEY,
    CAMERA_ALBUM_LANGUAGE_KEY,
    PickerAssetOptions,
)
from ..errors import SettingsInvalidError
from ..settings.manager import SettingsManager
from ..utils.logging import logger


@dataclass(frozen=True)
class CameraAlbumCache:
    identifier: Optional[str] = None
    select_options: Optional[PickerAssetOptions] = None
    language: Optional[str] = None

    def is_valid_for(self, select_options: PickerAssetOptions, language: Optional[str]) -> bool:
        """Return ``True`` when the cached identifier may be reused.

        The cache is only trusted for the language it was derived under, and
        either for any selection mode (when it was cached with photos and
        videos) or for exactly the mode it was cached with.
        """

        if self.identifier is None or self.select_options is None:
            return False
        if self.language is None or self.language != language:
            return False
        cached = self.select_options
        return (cached.is_photo and cached.is_video) or cached == select_options


def _parse_options(raw: Any) -> Optional[PickerAssetOptions]:
    if isinstance(raw, bool) or not isinstance(raw, int):
        return None
    try:
        return PickerAssetOptions.parse(raw)
    except SettingsInvalidError:
        return None


class CameraAlbumCacheStore:
    """Read and write :class:`CameraAlbumCache` through a settings store."""

    def __init__(self, settings: SettingsManager) -> None:
        self._settings = settings

    def load(self) -> CameraAlbumCache:
        identifier = self._settings.get(CAMERA_ALBUM_IDENTIFIER_KEY)
        language = self._settings.get(CAMERA_ALBUM_LANGUAGE_KEY)
        raw_options = self._settings.get(CAMERA_ALBUM_IDENTIFIER_TYPE_KEY)
        options = _parse_options(raw_options)
        if raw_options is not None and options is None:
            logger.warning("Ignoring malformed cached select options %r", raw_options)
        return CameraAlbumCache(
            identifier=identifier if isinstance(identifier, str) and identifier else None,
            select_options=options,
            language=language if isinstance(language, str) else None,
        )

    def save(self, cache: CameraAlbumCache) -> None:
        self._settings.update(
            {
                CAMERA_ALBUM_IDENTIFIER_KEY: cache.identifier,
                CAMERA_ALBUM_IDENTIFIER_TYPE_KEY: None if cache.select_options is None else int(cache.select_options),
                CAMERA_ALBUM_LANGUAGE_KEY: cache.language,
            }
        )

    def clear_identifier(self) -> None:
        self._settings.remove(CAMERA_ALBUM_IDENTIFIER_KEY)

