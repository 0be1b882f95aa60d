"""Qt list model exposing picker albums to views."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence

from PySide6.QtCore import QAbstractListModel, QModelIndex, QObject, Qt

from ..models import PhotoAssetCollection

if TYPE_CHECKING:  # pragma: no cover - import only for type checking
    from ..library.base import PhotoLibrary

logger = logging.getLogger(__name__)


class AlbumRoles(IntEnum):
    TitleRole = int(Qt.ItemDataRole.UserRole) + 1
    CountRole = int(Qt.ItemDataRole.UserRole) + 2
    IdentifierRole = int(Qt.ItemDataRole.UserRole) + 3
    IsCameraRollRole = int(Qt.ItemDataRole.UserRole) + 4
    CoverImageRole = int(Qt.ItemDataRole.UserRole) + 5


class AlbumListModel(QAbstractListModel):
    """List of :class:`PhotoAssetCollection` rows in picker order."""

    def __init__(
        self,
        library: Optional["PhotoLibrary"] = None,
        *,
        cover_size: tuple[int, int] = (256, 256),
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._library = library
        self._cover_size = cover_size
        self._albums: List[PhotoAssetCollection] = []
        self._covers: Dict[str, object] = {}

    def set_albums(self, albums: Sequence[PhotoAssetCollection]) -> None:
        self.beginResetModel()
        self._albums = list(albums)
        self._covers.clear()
        self.endResetModel()

    def album_at(self, row: int) -> Optional[PhotoAssetCollection]:
        if 0 <= row < len(self._albums):
            return self._albums[row]
        return None

    # ------------------------------------------------------------------
    # QAbstractListModel
    # ------------------------------------------------------------------
    def rowCount(self, parent: QModelIndex | None = None) -> int:  # type: ignore[override]
        if parent is not None and parent.isValid():
            return 0
        return len(self._albums)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole):  # type: ignore[override]
        if not index.isValid():
            return None
        album = self.album_at(index.row())
        if album is None:
            return None
        if role in (Qt.ItemDataRole.DisplayRole, AlbumRoles.TitleRole):
            return album.title
        if role == AlbumRoles.CountRole:
            return album.count
        if role == AlbumRoles.IdentifierRole:
            return album.identifier
        if role == AlbumRoles.IsCameraRollRole:
            return album.is_camera_roll
        if role == AlbumRoles.CoverImageRole:
            return self._cover_for(album)
        return None

    def roleNames(self) -> Dict[int, bytes]:  # type: ignore[override]
        names = dict(super().roleNames())
        names.update(
            {
                int(AlbumRoles.TitleRole): b"title",
                int(AlbumRoles.CountRole): b"count",
                int(AlbumRoles.IdentifierRole): b"identifier",
                int(AlbumRoles.IsCameraRollRole): b"isCameraRoll",
                int(AlbumRoles.CoverImageRole): b"coverImage",
            }
        )
        return names

    def _cover_for(self, album: PhotoAssetCollection):
        if album.real_cover_image is not None:
            return album.real_cover_image
        if self._library is None:
            return None
        if album.identifier not in self._covers:
            self._covers[album.identifier] = album.cover_image(self._library, self._cover_size)
            logger.debug("Loaded cover for album %s", album.identifier)
        return self._covers[album.identifier]
