"""In-memory photo library backend."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Sequence

from ..models import Asset, AssetCollection, CollectionKind
from .thumbnails import load_thumbnail

if TYPE_CHECKING:  # pragma: no cover - only for type checking
    from PIL import Image

    from ..fetch_options import FetchOptions


class MemoryPhotoLibrary:
    """Library whose collections and assets are supplied by the host.

    Every group enumeration and direct lookup is recorded in
    :attr:`enumerations` and :attr:`lookups` so callers can observe how the
    library was accessed.
    """

    def __init__(self) -> None:
        self._groups: Dict[CollectionKind, List[AssetCollection]] = {
            CollectionKind.SMART_ALBUM: [],
            CollectionKind.ALBUM: [],
        }
        self._assets: Dict[str, List[Asset]] = {}
        self.enumerations: List[CollectionKind] = []
        self.lookups: List[str] = []

    def add_collection(
        self,
        title: str,
        *,
        kind: CollectionKind = CollectionKind.ALBUM,
        subtype: int = 2,
        assets: Iterable[Asset] = (),
        identifier: Optional[str] = None,
        estimated_count: Optional[int] = None,
    ) -> AssetCollection:
        """Register a collection and return it.

        ``estimated_count`` defaults to the number of *assets*; pass it to
        model a library whose estimate disagrees with the real contents.
        """

        items = list(assets)
        collection = AssetCollection(
            local_identifier=identifier or str(uuid.uuid4()),
            localized_title=title,
            kind=kind,
            subtype=int(subtype),
            estimated_asset_count=len(items) if estimated_count is None else estimated_count,
        )
        self._groups[kind].append(collection)
        self._assets[collection.local_identifier] = items
        return collection

    def remove_collection(self, local_identifier: str) -> None:
        for collections in self._groups.values():
            collections[:] = [c for c in collections if c.local_identifier != local_identifier]
        self._assets.pop(local_identifier, None)

    # ------------------------------------------------------------------
    # PhotoLibrary
    # ------------------------------------------------------------------
    def fetch_asset_collections(
        self, kind: CollectionKind, options: Optional["FetchOptions"] = None
    ) -> Sequence[AssetCollection]:
        self.enumerations.append(kind)
        return list(self._groups[kind])

    def fetch_asset_collection(self, local_identifier: str) -> Optional[AssetCollection]:
        self.lookups.append(local_identifier)
        for collections in self._groups.values():
            for collection in collections:
                if collection.local_identifier == local_identifier:
                    return collection
        return None

    def fetch_assets(
        self, collection: AssetCollection, options: Optional["FetchOptions"] = None
    ) -> List[Asset]:
        assets = self._assets.get(collection.local_identifier, [])
        if options is None:
            return list(assets)
        return options.apply(assets)

    def request_thumbnail(self, asset: Asset, size: tuple[int, int]) -> Optional["Image.Image"]:
        if asset.path is None:
            return None
        return load_thumbnail(asset.path, size)
