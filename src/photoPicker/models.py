"""Domain models shared by the library backends and the album helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:  # pragma: no cover - only for type checking
    from PIL import Image

    from .fetch_options import FetchOptions
    from .library.base import PhotoLibrary


class MediaKind(str, Enum):
    PHOTO = "photo"
    GIF = "gif"
    LIVE_PHOTO = "live_photo"
    VIDEO = "video"


class CollectionKind(str, Enum):
    """The two album groups a library exposes."""

    SMART_ALBUM = "smartAlbum"
    ALBUM = "album"


class AssetCollectionSubtype(IntEnum):
    """Platform collection subtype codes.

    The values mirror the platform photo framework and should be treated as
    opaque constants; only ``USER_LIBRARY`` and the excluded set are relied on.
    """

    ALBUM_REGULAR = 2
    ALBUM_IMPORTED = 6
    SMART_ALBUM_GENERIC = 200
    SMART_ALBUM_PANORAMAS = 201
    SMART_ALBUM_VIDEOS = 202
    SMART_ALBUM_FAVORITES = 203
    SMART_ALBUM_TIMELAPSES = 204
    SMART_ALBUM_ALL_HIDDEN = 205
    SMART_ALBUM_RECENTLY_ADDED = 206
    SMART_ALBUM_BURSTS = 207
    SMART_ALBUM_SLOMO_VIDEOS = 208
    SMART_ALBUM_USER_LIBRARY = 209
    SMART_ALBUM_SELF_PORTRAITS = 210
    SMART_ALBUM_SCREENSHOTS = 211
    SMART_ALBUM_DEPTH_EFFECT = 212
    SMART_ALBUM_LIVE_PHOTOS = 213
    SMART_ALBUM_ANIMATED = 214
    SMART_ALBUM_LONG_EXPOSURES = 215
    SMART_ALBUM_RECENTLY_DELETED = 1000000201


# Pseudo albums that never show up in the picker, whatever their item count.
FILTERED_SUBTYPES = frozenset(
    {
        AssetCollectionSubtype.SMART_ALBUM_ALL_HIDDEN,
        AssetCollectionSubtype.SMART_ALBUM_LONG_EXPOSURES,
        AssetCollectionSubtype.SMART_ALBUM_DEPTH_EFFECT,
        AssetCollectionSubtype.SMART_ALBUM_TIMELAPSES,
        AssetCollectionSubtype.SMART_ALBUM_RECENTLY_DELETED,
    }
)


@dataclass
class Asset:
    local_identifier: str
    media_kind: MediaKind
    creation_date: Optional[datetime] = None
    path: Optional[Path] = None
    # Paired motion file of a live photo.
    motion_path: Optional[Path] = None

    @property
    def is_video(self) -> bool:
        return self.media_kind == MediaKind.VIDEO


@dataclass(frozen=True)
class AssetCollection:
    """A collection as reported by a photo library backend."""

    local_identifier: str
    localized_title: str
    kind: CollectionKind
    subtype: int
    estimated_asset_count: int

    @property
    def is_filtered_album(self) -> bool:
        return self.subtype in FILTERED_SUBTYPES

    @property
    def is_camera_roll(self) -> bool:
        return self.subtype == AssetCollectionSubtype.SMART_ALBUM_USER_LIBRARY


@dataclass
class PhotoAssetCollection:
    """Album descriptor handed to the picker UI."""

    collection: AssetCollection
    options: Optional["FetchOptions"] = None
    count: int = 0
    assets: List[Asset] = field(default_factory=list)
    real_cover_image: Optional["Image.Image"] = None
    is_camera_roll: bool = False

    @property
    def identifier(self) -> str:
        return self.collection.local_identifier

    @property
    def title(self) -> str:
        return self.collection.localized_title

    @property
    def cover_asset(self) -> Optional[Asset]:
        return self.assets[0] if self.assets else None

    def fetch_or_update_result(self, library: "PhotoLibrary") -> None:
        """Load the assets matching :attr:`options` and recompute :attr:`count`."""

        self.assets = list(library.fetch_assets(self.collection, self.options))
        self.count = len(self.assets)

    def cover_image(self, library: "PhotoLibrary", size: tuple[int, int]) -> Optional["Image.Image"]:
        """Return the override cover if set, else a thumbnail of the cover asset."""

        if self.real_cover_image is not None:
            return self.real_cover_image
        asset = self.cover_asset
        if asset is None:
            return None
        return library.request_thumbnail(asset, size)
