"""Photo library backend that reads a local directory tree.

Layout conventions:

- every top-level sub-directory is a user album containing the media of its
  whole subtree;
- ``.hidden`` and ``.trash`` at the root hold hidden and recently deleted
  media, which only appear in the matching smart albums;
- other dot-directories are ignored;
- a still image and one ``.mov``/``.mp4`` sharing its stem in the same folder
  form a live photo, listed once under the still's path; every other file is
  listed on its own.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence

from PIL import Image, UnidentifiedImageError

from ..config import (
    GIF_EXTENSIONS,
    HIDDEN_DIR_NAME,
    IMAGE_EXTENSIONS,
    TRASH_DIR_NAME,
    VIDEO_EXTENSIONS,
)
from ..errors import LibraryUnavailableError
from ..models import Asset, AssetCollection, AssetCollectionSubtype, CollectionKind, MediaKind
from ..utils.logging import logger
from .thumbnails import load_thumbnail

if TYPE_CHECKING:  # pragma: no cover - only for type checking
    from ..fetch_options import FetchOptions

_EXIF_IFD = 0x8769
_EXIF_DATETIME_ORIGINAL = 36867
_EXIF_DATETIME = 306
_EXIF_DATE_FORMAT = "%Y:%m:%d %H:%M:%S"

_SMART_ALBUMS = (
    (AssetCollectionSubtype.SMART_ALBUM_USER_LIBRARY, "Recents"),
    (AssetCollectionSubtype.SMART_ALBUM_VIDEOS, "Videos"),
    (AssetCollectionSubtype.SMART_ALBUM_LIVE_PHOTOS, "Live Photos"),
    (AssetCollectionSubtype.SMART_ALBUM_ANIMATED, "Animated"),
    (AssetCollectionSubtype.SMART_ALBUM_ALL_HIDDEN, "Hidden"),
    (AssetCollectionSubtype.SMART_ALBUM_RECENTLY_DELETED, "Recently Deleted"),
)


def smart_album_identifier(subtype: int) -> str:
    return f"smart/{int(subtype)}"


def user_album_identifier(rel: str) -> str:
    return f"album/{rel}"


def _read_exif_date(path: Path) -> Optional[datetime]:
    try:
        with Image.open(path) as image:
            exif = image.getexif()
    except (OSError, UnidentifiedImageError, Image.DecompressionBombError):
        return None
    raw = exif.get_ifd(_EXIF_IFD).get(_EXIF_DATETIME_ORIGINAL) or exif.get(_EXIF_DATETIME)
    if not isinstance(raw, str):
        return None
    try:
        return datetime.strptime(raw.strip().rstrip("\x00"), _EXIF_DATE_FORMAT).replace(tzinfo=timezone.utc)
    except ValueError:
        return None


def _creation_date(path: Path, kind: MediaKind) -> datetime:
    if kind != MediaKind.VIDEO:
        exif_date = _read_exif_date(path)
        if exif_date is not None:
            return exif_date
    return datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)


@dataclass
class _Snapshot:
    collections: Dict[CollectionKind, List[AssetCollection]] = field(default_factory=dict)
    assets: Dict[str, List[Asset]] = field(default_factory=dict)


class FolderPhotoLibrary:
    """Expose a directory tree through the photo library interface.

    The tree is scanned lazily on first access and cached; call
    :meth:`refresh` after the directory changes.
    """

    def __init__(self, root: Path) -> None:
        self._root = Path(root)
        self._snapshot: Optional[_Snapshot] = None

    @property
    def root(self) -> Path:
        return self._root

    def refresh(self) -> None:
        self._snapshot = None

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------
    def _classify_directory(self, directory: Path, filenames: List[str]) -> List[Asset]:
        stills: List[Path] = []
        others: List[tuple[Path, MediaKind]] = []
        videos: List[Path] = []
        for name in sorted(filenames):
            if name.startswith("."):
                continue
            path = directory / name
            suffix = path.suffix.lower()
            if suffix in IMAGE_EXTENSIONS:
                stills.append(path)
            elif suffix in GIF_EXTENSIONS:
                others.append((path, MediaKind.GIF))
            elif suffix in VIDEO_EXTENSIONS:
                videos.append(path)

        # Each motion file pairs with at most one still of the same stem.
        unpaired: Dict[str, List[Path]] = {}
        for path in videos:
            unpaired.setdefault(path.stem.lower(), []).append(path)

        assets: List[Asset] = []
        for path in stills:
            candidates = unpaired.get(path.stem.lower())
            motion = candidates.pop(0) if candidates else None
            kind = MediaKind.LIVE_PHOTO if motion is not None else MediaKind.PHOTO
            assets.append(self._make_asset(path, kind, motion))
        for path, kind in others:
            assets.append(self._make_asset(path, kind))
        for remaining in unpaired.values():
            for path in remaining:
                assets.append(self._make_asset(path, MediaKind.VIDEO))
        return assets

    def _make_asset(self, path: Path, kind: MediaKind, motion: Optional[Path] = None) -> Asset:
        return Asset(
            local_identifier=path.relative_to(self._root).as_posix(),
            media_kind=kind,
            creation_date=_creation_date(path, kind),
            path=path,
            motion_path=motion,
        )

    def _scan_tree(self, top: Path) -> List[Asset]:
        assets: List[Asset] = []
        for dirpath, dirnames, filenames in os.walk(top):
            # Prune dot-directories in place so os.walk skips them.
            dirnames[:] = sorted(name for name in dirnames if not name.startswith("."))
            assets.extend(self._classify_directory(Path(dirpath), filenames))
        return assets

    def _scan(self) -> _Snapshot:
        if not self._root.is_dir():
            raise LibraryUnavailableError(f"Library root is not a directory: {self._root}")

        logger.debug("Scanning photo folder %s", self._root)
        try:
            visible = self._scan_tree(self._root)
            hidden_dir = self._root / HIDDEN_DIR_NAME
            trash_dir = self._root / TRASH_DIR_NAME
            hidden = self._scan_tree(hidden_dir) if hidden_dir.is_dir() else []
            trashed = self._scan_tree(trash_dir) if trash_dir.is_dir() else []
        except OSError as exc:
            raise LibraryUnavailableError(f"Cannot read library {self._root}: {exc}") from exc

        snapshot = _Snapshot()
        by_subtype: Dict[int, List[Asset]] = {
            AssetCollectionSubtype.SMART_ALBUM_USER_LIBRARY: list(visible),
            AssetCollectionSubtype.SMART_ALBUM_VIDEOS: [a for a in visible if a.media_kind == MediaKind.VIDEO],
            AssetCollectionSubtype.SMART_ALBUM_LIVE_PHOTOS: [
                a for a in visible if a.media_kind == MediaKind.LIVE_PHOTO
            ],
            AssetCollectionSubtype.SMART_ALBUM_ANIMATED: [a for a in visible if a.media_kind == MediaKind.GIF],
            AssetCollectionSubtype.SMART_ALBUM_ALL_HIDDEN: hidden,
            AssetCollectionSubtype.SMART_ALBUM_RECENTLY_DELETED: trashed,
        }
        smart: List[AssetCollection] = []
        for subtype, title in _SMART_ALBUMS:
            identifier = smart_album_identifier(subtype)
            items = by_subtype[subtype]
            smart.append(
                AssetCollection(
                    local_identifier=identifier,
                    localized_title=title,
                    kind=CollectionKind.SMART_ALBUM,
                    subtype=int(subtype),
                    estimated_asset_count=len(items),
                )
            )
            snapshot.assets[identifier] = items
        snapshot.collections[CollectionKind.SMART_ALBUM] = smart

        user: List[AssetCollection] = []
        for entry in sorted(self._root.iterdir(), key=lambda p: p.name.lower()):
            if not entry.is_dir() or entry.name.startswith("."):
                continue
            prefix = entry.name + "/"
            items = [a for a in visible if a.local_identifier.startswith(prefix)]
            identifier = user_album_identifier(entry.name)
            user.append(
                AssetCollection(
                    local_identifier=identifier,
                    localized_title=entry.name,
                    kind=CollectionKind.ALBUM,
                    subtype=int(AssetCollectionSubtype.ALBUM_REGULAR),
                    estimated_asset_count=len(items),
                )
            )
            snapshot.assets[identifier] = items
        snapshot.collections[CollectionKind.ALBUM] = user
        return snapshot

    def _ensure_snapshot(self) -> _Snapshot:
        if self._snapshot is None:
            self._snapshot = self._scan()
        return self._snapshot

    # ------------------------------------------------------------------
    # PhotoLibrary
    # ------------------------------------------------------------------
    def fetch_asset_collections(
        self, kind: CollectionKind, options: Optional["FetchOptions"] = None
    ) -> Sequence[AssetCollection]:
        return list(self._ensure_snapshot().collections.get(kind, []))

    def fetch_asset_collection(self, local_identifier: str) -> Optional[AssetCollection]:
        snapshot = self._ensure_snapshot()
        for collections in snapshot.collections.values():
            for collection in collections:
                if collection.local_identifier == local_identifier:
                    return collection
        return None

    def fetch_assets(
        self, collection: AssetCollection, options: Optional["FetchOptions"] = None
    ) -> List[Asset]:
        assets = self._ensure_snapshot().assets.get(collection.local_identifier, [])
        if options is None:
            return list(assets)
        return options.apply(assets)

    def request_thumbnail(self, asset: Asset, size: tuple[int, int]) -> Optional[Image.Image]:
        if asset.path is None or asset.is_video:
            return None
        return load_thumbnail(asset.path, size)
