from __future__ import annotations

import pytest

from photoPicker.albums.camera_cache import CameraAlbumCache, CameraAlbumCacheStore
from photoPicker.config import (
    CAMERA_ALBUM_IDENTIFIER_KEY,
    CAMERA_ALBUM_IDENTIFIER_TYPE_KEY,
    CAMERA_ALBUM_LANGUAGE_KEY,
    PickerAssetOptions,
)
from photoPicker.settings.manager import SettingsManager

PHOTO = PickerAssetOptions.PHOTO
VIDEO = PickerAssetOptions.VIDEO
BOTH = PHOTO | VIDEO


@pytest.mark.parametrize(
    ("cache", "current", "language", "expected"),
    [
        (CameraAlbumCache("id", BOTH, "en"), PHOTO, "en", True),
        (CameraAlbumCache("id", BOTH, "en"), VIDEO, "en", True),
        (CameraAlbumCache("id", PHOTO, "en"), PHOTO, "en", True),
        (CameraAlbumCache("id", PHOTO, "en"), VIDEO, "en", False),
        (CameraAlbumCache("id", PHOTO, "en"), BOTH, "en", False),
        (CameraAlbumCache("id", BOTH, "en"), BOTH, "de", False),
        (CameraAlbumCache("id", BOTH, None), BOTH, "en", False),
        (CameraAlbumCache("id", None, "en"), BOTH, "en", False),
        (CameraAlbumCache(None, BOTH, "en"), BOTH, "en", False),
        # A GIF-only cache still counts as photos for the "both" shortcut.
        (CameraAlbumCache("id", PickerAssetOptions.GIF_PHOTO | VIDEO, "en"), PHOTO, "en", True),
    ],
)
def test_cache_validity(cache: CameraAlbumCache, current: PickerAssetOptions, language, expected: bool) -> None:
    assert cache.is_valid_for(current, language) is expected


def test_store_round_trips_through_settings(settings: SettingsManager) -> None:
    store = CameraAlbumCacheStore(settings)
    store.save(CameraAlbumCache("roll", BOTH, "en-GB"))

    assert settings.get(CAMERA_ALBUM_IDENTIFIER_KEY) == "roll"
    assert settings.get(CAMERA_ALBUM_IDENTIFIER_TYPE_KEY) == 3
    assert settings.get(CAMERA_ALBUM_LANGUAGE_KEY) == "en-GB"
    assert store.load() == CameraAlbumCache("roll", BOTH, "en-GB")


def test_empty_store_loads_empty_cache(settings: SettingsManager) -> None:
    assert CameraAlbumCacheStore(settings).load() == CameraAlbumCache()


def test_malformed_values_are_ignored(settings: SettingsManager) -> None:
    settings.set(CAMERA_ALBUM_IDENTIFIER_KEY, "")
    settings.set(CAMERA_ALBUM_IDENTIFIER_TYPE_KEY, "photo")
    settings.set(CAMERA_ALBUM_LANGUAGE_KEY, 42)

    assert CameraAlbumCacheStore(settings).load() == CameraAlbumCache()


def test_clear_identifier_keeps_mode_and_language(settings: SettingsManager) -> None:
    store = CameraAlbumCacheStore(settings)
    store.save(CameraAlbumCache("roll", PHOTO, "en"))

    store.clear_identifier()

    assert store.load() == CameraAlbumCache(None, PHOTO, "en")


def test_save_writes_all_keys_at_once(settings: SettingsManager, monkeypatch: pytest.MonkeyPatch) -> None:
    from photoPicker.settings import manager

    writes: list[dict] = []
    monkeypatch.setattr(manager, "write_json", lambda path, data: writes.append(dict(data)))

    CameraAlbumCacheStore(settings).save(CameraAlbumCache("roll", BOTH, "en"))

    assert writes == [
        {
            CAMERA_ALBUM_IDENTIFIER_KEY: "roll",
            CAMERA_ALBUM_IDENTIFIER_TYPE_KEY: 3,
            CAMERA_ALBUM_LANGUAGE_KEY: "en",
        }
    ]


def test_failed_save_leaves_previous_cache_on_disk(settings: SettingsManager, monkeypatch: pytest.MonkeyPatch) -> None:
    from photoPicker.settings import manager

    store = CameraAlbumCacheStore(settings)
    store.save(CameraAlbumCache("old", PHOTO, "en"))

    def _fail(path, data):
        raise PermissionError("settings locked")

    monkeypatch.setattr(manager, "write_json", _fail)
    with pytest.raises(PermissionError):
        store.save(CameraAlbumCache("new", VIDEO, "de"))
    monkeypatch.undo()

    assert CameraAlbumCacheStore(SettingsManager(settings.path)).load() == CameraAlbumCache("old", PHOTO, "en")
