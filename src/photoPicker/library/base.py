"""Interface every photo library backend implements."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Protocol, Sequence

from ..models import Asset, AssetCollection, CollectionKind

if TYPE_CHECKING:  # pragma: no cover - only for type checking
    from PIL import Image

    from ..fetch_options import FetchOptions


class PhotoLibrary(Protocol):
    """Read-only view of a photo library.

    Backends raise :class:`~photoPicker.errors.LibraryUnavailableError` when the
    underlying store cannot be read; the album helpers treat that as "no
    result" rather than propagating it.
    """

    def fetch_asset_collections(
        self, kind: CollectionKind, options: Optional["FetchOptions"] = None
    ) -> Sequence[AssetCollection]:
        """Return every collection of the *kind* group in library order."""
        ...

    def fetch_asset_collection(self, local_identifier: str) -> Optional[AssetCollection]:
        """Look a collection up directly by identifier."""
        ...

    def fetch_assets(
        self, collection: AssetCollection, options: Optional["FetchOptions"] = None
    ) -> List[Asset]:
        """Return the assets of *collection* filtered and ordered by *options*."""
        ...

    def request_thumbnail(self, asset: Asset, size: tuple[int, int]) -> Optional["Image.Image"]:
        ...
