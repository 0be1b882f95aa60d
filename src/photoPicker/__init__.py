"""Album helpers for the photo picker."""

from .albums import (
    CameraAlbumCacheStore,
    fetch_asset_collections,
    fetch_camera_asset_collection,
    resolve_camera_roll,
)
from .config import PickerAssetOptions, PickerConfiguration
from .models import PhotoAssetCollection
from .settings import SettingsManager

__all__ = [
    "CameraAlbumCacheStore",
    "PhotoAssetCollection",
    "PickerAssetOptions",
    "PickerConfiguration",
    "SettingsManager",
    "fetch_asset_collections",
    "fetch_camera_asset_collection",
    "resolve_camera_roll",
]
