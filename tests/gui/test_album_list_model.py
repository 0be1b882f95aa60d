from __future__ import annotations

import pytest

pytest.importorskip("PySide6", reason="PySide6 is required for model tests", exc_type=ImportError)

from PIL import Image
from PySide6.QtCore import QModelIndex, Qt

from photoPicker.albums.fetch import fetch_asset_collections
from photoPicker.config import PickerConfiguration
from photoPicker.gui.album_list_model import AlbumListModel, AlbumRoles
from photoPicker.library.memory import MemoryPhotoLibrary
from photoPicker.models import Asset, AssetCollectionSubtype, CollectionKind, MediaKind


@pytest.fixture()
def populated(tmp_path):
    still = tmp_path / "cover.png"
    Image.new("RGB", (40, 20), color="blue").save(still)
    library = MemoryPhotoLibrary()
    library.add_collection("Trip", assets=[Asset("t0", MediaKind.PHOTO, path=still)], identifier="trip")
    library.add_collection(
        "Recents",
        kind=CollectionKind.SMART_ALBUM,
        subtype=AssetCollectionSubtype.SMART_ALBUM_USER_LIBRARY,
        assets=[Asset("r0", MediaKind.VIDEO), Asset("r1", MediaKind.PHOTO)],
        identifier="roll",
    )
    albums = fetch_asset_collections(PickerConfiguration(), library, local_count=1)
    model = AlbumListModel(library, cover_size=(10, 10))
    model.set_albums(albums)
    return model


def test_rows_and_roles(populated: AlbumListModel) -> None:
    model = populated
    assert model.rowCount() == 2
    first = model.index(0, 0)
    second = model.index(1, 0)

    assert model.data(first, Qt.ItemDataRole.DisplayRole) == "Recents"
    assert model.data(first, AlbumRoles.CountRole) == 3
    assert model.data(first, AlbumRoles.IsCameraRollRole) is True
    assert model.data(second, AlbumRoles.TitleRole) == "Trip"
    assert model.data(second, AlbumRoles.IdentifierRole) == "trip"
    assert model.data(second, AlbumRoles.IsCameraRollRole) is False


def test_cover_role_loads_thumbnail(populated: AlbumListModel) -> None:
    cover = populated.data(populated.index(1, 0), AlbumRoles.CoverImageRole)

    assert cover is not None
    assert cover.size == (10, 5)
    # Assets without a file have no cover.
    assert populated.data(populated.index(0, 0), AlbumRoles.CoverImageRole) is None


def test_invalid_index_and_role_names(populated: AlbumListModel) -> None:
    assert populated.data(QModelIndex(), AlbumRoles.TitleRole) is None
    assert populated.album_at(5) is None
    names = populated.roleNames()
    assert names[int(AlbumRoles.IsCameraRollRole)] == b"isCameraRoll"


def test_set_albums_resets(populated: AlbumListModel) -> None:
    populated.set_albums([])

    assert populated.rowCount() == 0
