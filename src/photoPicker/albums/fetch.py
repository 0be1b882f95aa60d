"""Album enumeration and camera-roll resolution for the picker.

All functions are synchronous and never raise for library failures: an
unreadable library degrades to an empty list or to "no camera roll".
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence

from ..config import PickerConfiguration
from ..errors import LibraryUnavailableError
from ..fetch_options import FetchOptions, media_kinds_for
from ..locale import preferred_language
from ..models import AssetCollection, CollectionKind, PhotoAssetCollection
from ..utils.logging import logger
from .camera_cache import CameraAlbumCache, CameraAlbumCacheStore

if TYPE_CHECKING:  # pragma: no cover - only for type checking
    from PIL import Image

    from ..library.base import PhotoLibrary

# Smart albums are always enumerated before user albums.
ALBUM_GROUPS = (CollectionKind.SMART_ALBUM, CollectionKind.ALBUM)


class StopToken:
    """Lets an enumeration callback end the enumeration early."""

    __slots__ = ("_stopped",)

    def __init__(self) -> None:
        self._stopped = False

    @property
    def stopped(self) -> bool:
        return self._stopped

    def stop(self) -> None:
        self._stopped = True


AlbumBlock = Callable[[AssetCollection, int, StopToken], None]
IncludeBlock = Callable[[PhotoAssetCollection, StopToken], bool]


def fetch_albums(
    library: "PhotoLibrary", kind: CollectionKind, options: Optional[FetchOptions] = None
) -> Sequence[AssetCollection]:
    return library.fetch_asset_collections(kind, options)


def enumerate_all_albums(
    library: "PhotoLibrary", options: Optional[FetchOptions], using_block: AlbumBlock
) -> None:
    """Call *using_block* for every non-empty, non-filtered album.

    Smart albums come first, then user albums. Once the block calls
    ``stop.stop()`` the current group is abandoned and the next is skipped.
    """

    stop = StopToken()
    for kind in ALBUM_GROUPS:
        for index, collection in enumerate(fetch_albums(library, kind, options)):
            if collection.estimated_asset_count > 0 and not collection.is_filtered_album:
                using_block(collection, index, stop)
                if stop.stopped:
                    break
        if stop.stopped:
            break


def fetch_camera_roll_album(
    library: "PhotoLibrary", options: Optional[FetchOptions] = None
) -> Optional[AssetCollection]:
    """Return the first non-empty user-library smart album, if any."""

    for collection in fetch_albums(library, CollectionKind.SMART_ALBUM, options):
        if collection.is_camera_roll and collection.estimated_asset_count > 0:
            return collection
    return None


def _prepare_options(config: PickerConfiguration, options: Optional[FetchOptions]) -> FetchOptions:
    if options is None:
        return FetchOptions.for_configuration(config)
    options.apply_configuration(config)
    if options.media_kinds is None:
        options.media_kinds = media_kinds_for(config.select_options)
    return options


def fetch_asset_collections(
    config: PickerConfiguration,
    library: "PhotoLibrary",
    *,
    local_count: int = 0,
    cover_image: Optional["Image.Image"] = None,
    options: Optional[FetchOptions] = None,
    using_block: Optional[IncludeBlock] = None,
) -> List[PhotoAssetCollection]:
    """Return the picker's album list, camera roll first.

    ``using_block`` decides whether each album is kept and may stop the
    enumeration. Every kept album has ``local_count`` added to its count;
    albums that still count zero are dropped. ``cover_image`` replaces the
    cover of the first album.
    """

    if not config.allow_load_photo_library:
        return []

    options = _prepare_options(config, options)
    collections: List[PhotoAssetCollection] = []

    def _handle(collection: AssetCollection, _index: int, stop: StopToken) -> None:
        descriptor = PhotoAssetCollection(collection, options=options)
        descriptor.fetch_or_update_result(library)
        if using_block is not None and not using_block(descriptor, stop):
            return
        descriptor.count += local_count
        if descriptor.count <= 0:
            return
        if collection.is_camera_roll:
            descriptor.is_camera_roll = True
            collections.insert(0, descriptor)
        else:
            collections.append(descriptor)

    try:
        enumerate_all_albums(library, options, _handle)
    except LibraryUnavailableError as exc:
        logger.warning("Album enumeration aborted: %s", exc)

    if collections and cover_image is not None:
        collections[0].real_cover_image = cover_image
    return collections


class CameraRollOutcome(str, Enum):
    ACCESS_DISABLED = "access_disabled"
    CACHED = "cached"
    DERIVED = "derived"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class CameraRollResolution:
    outcome: CameraRollOutcome
    collection: Optional[PhotoAssetCollection] = None

    @property
    def found(self) -> bool:
        return self.collection is not None


def _lookup_cached(library: "PhotoLibrary", identifier: str) -> Optional[AssetCollection]:
    try:
        return library.fetch_asset_collection(identifier)
    except LibraryUnavailableError as exc:
        logger.warning("Direct lookup of camera roll %s failed: %s", identifier, exc)
        return None


def _scan_camera_roll(library: "PhotoLibrary") -> Optional[AssetCollection]:
    try:
        return fetch_camera_roll_album(library)
    except LibraryUnavailableError as exc:
        logger.warning("Camera roll scan failed: %s", exc)
        return None


def resolve_camera_roll(
    config: PickerConfiguration,
    library: "PhotoLibrary",
    cache_store: CameraAlbumCacheStore,
    *,
    language: Optional[str] = None,
    local_count: int = 0,
    options: Optional[FetchOptions] = None,
) -> CameraRollResolution:
    """Find the camera-roll album, reusing the cached identifier when valid.

    A fresh derivation always overwrites the cache with the new identifier,
    the current select options and *language* (the preferred UI language
    when omitted). When no camera roll exists the stale identifier is
    dropped from the cache.
    """

    if not config.allow_load_photo_library:
        return CameraRollResolution(CameraRollOutcome.ACCESS_DISABLED)

    options = _prepare_options(config, options)
    if language is None:
        language = preferred_language()

    cache = cache_store.load()
    collection: Optional[AssetCollection] = None
    outcome = CameraRollOutcome.DERIVED
    if cache.is_valid_for(config.select_options, language):
        collection = _lookup_cached(library, cache.identifier)
        if collection is not None:
            outcome = CameraRollOutcome.CACHED
            logger.debug("Using cached camera roll %s", cache.identifier)
        else:
            logger.debug("Cached camera roll %s no longer resolves", cache.identifier)

    if collection is None:
        collection = _scan_camera_roll(library)
        if collection is None:
            if cache.identifier is not None:
                cache_store.clear_identifier()
            logger.debug("No camera roll album in library")
            return CameraRollResolution(CameraRollOutcome.NOT_FOUND)
        cache_store.save(
            CameraAlbumCache(
                identifier=collection.local_identifier,
                select_options=config.select_options,
                language=language,
            )
        )
        logger.debug("Derived camera roll %s", collection.local_identifier)

    descriptor = PhotoAssetCollection(collection, options=options, is_camera_roll=True)
    try:
        descriptor.fetch_or_update_result(library)
    except LibraryUnavailableError as exc:
        logger.warning("Cannot load camera roll assets: %s", exc)
    descriptor.count += local_count
    return CameraRollResolution(outcome, descriptor)


def fetch_camera_asset_collection(
    config: PickerConfiguration,
    library: "PhotoLibrary",
    cache_store: CameraAlbumCacheStore,
    *,
    language: Optional[str] = None,
    local_count: int = 0,
    options: Optional[FetchOptions] = None,
) -> Optional[PhotoAssetCollection]:
    """Return the camera-roll album or ``None``; see :func:`resolve_camera_roll`."""

    return resolve_camera_roll(
        config,
        library,
        cache_store,
        language=language,
        local_count=local_count,
        options=options,
    ).collection
