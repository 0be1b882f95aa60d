"""Album listing and camera-roll resolution."""

from .camera_cache import CameraAlbumCache, CameraAlbumCacheStore
from .fetch import (
    CameraRollOutcome,
    CameraRollResolution,
    StopToken,
    enumerate_all_albums,
    fetch_asset_collections,
    fetch_camera_asset_collection,
    fetch_camera_roll_album,
    resolve_camera_roll,
)

__all__ = [
    "CameraAlbumCache",
    "CameraAlbumCacheStore",
    "CameraRollOutcome",
    "CameraRollResolution",
    "StopToken",
    "enumerate_all_albums",
    "fetch_asset_collections",
    "fetch_camera_asset_collection",
    "fetch_camera_roll_album",
    "resolve_camera_roll",
]
