# -*- coding: utf-8 -*-
"""
PySide6 album picker demo

Lists the albums of a photo folder the way the picker sees them: camera roll
first, noise albums hidden, counts filtered by the chosen media type. The
camera-roll reference is cached in ``settings.json`` next to this script.

Dependencies:
- PySide6
- Pillow

Run:
  python album_picker.py ~/Pictures --select video
"""

import argparse
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication, QLabel, QListView, QMainWindow, QVBoxLayout, QWidget

from photoPicker.albums import CameraAlbumCacheStore, fetch_asset_collections, resolve_camera_roll
from photoPicker.config import PickerAssetOptions, PickerConfiguration
from photoPicker.gui.album_list_model import AlbumListModel
from photoPicker.library.folder import FolderPhotoLibrary
from photoPicker.settings import SettingsManager

SETTINGS_PATH = Path(__file__).resolve().with_name("settings.json")


class PickerWindow(QMainWindow):
    def __init__(self, library: FolderPhotoLibrary, config: PickerConfiguration, settings: SettingsManager):
        super().__init__()
        self.setWindowTitle(f"Albums: {library.root}")
        self.resize(360, 480)

        resolution = resolve_camera_roll(config, library, CameraAlbumCacheStore(settings))
        status = QLabel(f"Camera roll: {resolution.outcome.value}")

        self.model = AlbumListModel(library)
        self.model.set_albums(fetch_asset_collections(config, library))
        view = QListView()
        view.setModel(self.model)
        view.clicked.connect(self._show_album)
        self.detail = QLabel()

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.addWidget(status)
        layout.addWidget(view)
        layout.addWidget(self.detail)
        self.setCentralWidget(central)

    def _show_album(self, index):
        album = self.model.album_at(index.row())
        if album is not None:
            self.detail.setText(f"{album.title}: {album.count} items")


def main():
    parser = argparse.ArgumentParser(description="Browse picker albums of a photo folder")
    parser.add_argument("root", type=Path)
    parser.add_argument("--select", default="photo,video", help="photo, video, gif_photo, live_photo")
    parser.add_argument("--by-date", action="store_true", help="sort albums' assets by creation date")
    args = parser.parse_args()

    settings = SettingsManager(SETTINGS_PATH)
    config = PickerConfiguration(
        creation_date=args.by_date,
        select_options=PickerAssetOptions.parse(args.select),
    )

    app = QApplication(sys.argv)
    window = PickerWindow(FolderPhotoLibrary(args.root), config, settings)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
