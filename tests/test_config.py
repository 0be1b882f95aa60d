from __future__ import annotations

import pytest

from photoPicker.config import DEFAULT_SELECT_OPTIONS, PickerAssetOptions, PickerConfiguration
from photoPicker.errors import SettingsInvalidError


def test_defaults() -> None:
    config = PickerConfiguration.from_mapping(None)

    assert config.allow_load_photo_library is True
    assert config.creation_date is False
    assert config.select_options == DEFAULT_SELECT_OPTIONS
    assert config.select_options.is_photo and config.select_options.is_video


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (1, PickerAssetOptions.PHOTO),
        (3, PickerAssetOptions.PHOTO | PickerAssetOptions.VIDEO),
        ("video", PickerAssetOptions.VIDEO),
        ("photo|live_photo", PickerAssetOptions.PHOTO | PickerAssetOptions.LIVE_PHOTO),
        (["gif_photo", "video"], PickerAssetOptions.GIF_PHOTO | PickerAssetOptions.VIDEO),
    ],
)
def test_select_options_parsing(raw, expected) -> None:
    assert PickerAssetOptions.parse(raw) == expected


@pytest.mark.parametrize("raw", [True, -1, 64, "panorama", 1.5])
def test_select_options_rejects_garbage(raw) -> None:
    with pytest.raises(SettingsInvalidError):
        PickerAssetOptions.parse(raw)


def test_photo_flags() -> None:
    assert PickerAssetOptions.LIVE_PHOTO.is_photo
    assert PickerAssetOptions.GIF_PHOTO.is_photo
    assert not PickerAssetOptions.VIDEO.is_photo
    assert PickerAssetOptions.VIDEO.is_video
    assert not PickerAssetOptions.PHOTO.is_video


def test_from_mapping_coerces_strings() -> None:
    config = PickerConfiguration.from_mapping(
        {"allow_load_photo_library": "off", "creation_date": "yes", "select_options": 2}
    )

    assert config == PickerConfiguration(
        allow_load_photo_library=False,
        creation_date=True,
        select_options=PickerAssetOptions.VIDEO,
    )


def test_from_mapping_rejects_bad_boolean() -> None:
    with pytest.raises(SettingsInvalidError):
        PickerConfiguration.from_mapping({"creation_date": "sometimes"})


def test_round_trip_mapping() -> None:
    config = PickerConfiguration(creation_date=True, select_options=PickerAssetOptions.PHOTO)

    assert PickerConfiguration.from_mapping(config.to_mapping()) == config
