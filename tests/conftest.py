import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from photoPicker.albums.camera_cache import CameraAlbumCacheStore  # noqa: E402
from photoPicker.library.memory import MemoryPhotoLibrary  # noqa: E402
from photoPicker.models import Asset, AssetCollectionSubtype, CollectionKind, MediaKind  # noqa: E402
from photoPicker.settings.manager import SettingsManager  # noqa: E402

BASE_DATE = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def make_assets(prefix: str, photos: int = 0, videos: int = 0) -> list[Asset]:
    """Return *photos* stills followed by *videos* clips, one minute apart."""

    assets = []
    for idx in range(photos):
        assets.append(
            Asset(f"{prefix}-p{idx}", MediaKind.PHOTO, creation_date=BASE_DATE + timedelta(minutes=idx))
        )
    for idx in range(videos):
        assets.append(
            Asset(
                f"{prefix}-v{idx}",
                MediaKind.VIDEO,
                creation_date=BASE_DATE + timedelta(minutes=photos + idx),
            )
        )
    return assets


@pytest.fixture()
def settings(tmp_path: Path) -> SettingsManager:
    return SettingsManager(tmp_path / "settings.json")


@pytest.fixture()
def cache_store(settings: SettingsManager) -> CameraAlbumCacheStore:
    return CameraAlbumCacheStore(settings)


@pytest.fixture()
def library() -> MemoryPhotoLibrary:
    """A library with a camera roll, noise smart albums and two user albums."""

    lib = MemoryPhotoLibrary()
    lib.add_collection(
        "Favorites",
        kind=CollectionKind.SMART_ALBUM,
        subtype=AssetCollectionSubtype.SMART_ALBUM_FAVORITES,
        assets=make_assets("fav", photos=2),
        identifier="smart-favorites",
    )
    lib.add_collection(
        "Recents",
        kind=CollectionKind.SMART_ALBUM,
        subtype=AssetCollectionSubtype.SMART_ALBUM_USER_LIBRARY,
        assets=make_assets("roll", photos=3, videos=2),
        identifier="smart-roll",
    )
    lib.add_collection(
        "Hidden",
        kind=CollectionKind.SMART_ALBUM,
        subtype=AssetCollectionSubtype.SMART_ALBUM_ALL_HIDDEN,
        assets=make_assets("hidden", photos=4),
        identifier="smart-hidden",
    )
    lib.add_collection(
        "Recently Deleted",
        kind=CollectionKind.SMART_ALBUM,
        subtype=AssetCollectionSubtype.SMART_ALBUM_RECENTLY_DELETED,
        assets=make_assets("trash", photos=1),
        identifier="smart-trash",
    )
    lib.add_collection("Trip", assets=make_assets("trip", photos=2, videos=1), identifier="album-trip")
    lib.add_collection("Clips", assets=make_assets("clips", videos=2), identifier="album-clips")
    return lib
