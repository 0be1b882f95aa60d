"""Sorting and filtering options applied when a library returns assets."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import FrozenSet, Iterable, List, Optional

from .config import PickerAssetOptions, PickerConfiguration
from .models import Asset, MediaKind

CREATION_DATE_KEY = "creationDate"


def ensure_utc(value: datetime) -> datetime:
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


@dataclass(frozen=True)
class SortDescriptor:
    key: str
    ascending: bool = True


def _sort_value(asset: Asset, key: str) -> tuple[bool, float, str]:
    if key == CREATION_DATE_KEY:
        value = asset.creation_date
        if value is None:
            return (False, float("-inf"), asset.local_identifier)
        return (True, ensure_utc(value).timestamp(), asset.local_identifier)
    raise ValueError(f"Unsupported sort key: {key!r}")


def media_kinds_for(options: PickerAssetOptions) -> FrozenSet[MediaKind]:
    """Return the media kinds a picker with *options* may show."""

    kinds = set()
    if options & PickerAssetOptions.PHOTO:
        # Plain photo selection also lists animated and live stills.
        kinds.update({MediaKind.PHOTO, MediaKind.GIF, MediaKind.LIVE_PHOTO})
    if options & PickerAssetOptions.GIF_PHOTO:
        kinds.add(MediaKind.GIF)
    if options & PickerAssetOptions.LIVE_PHOTO:
        kinds.add(MediaKind.LIVE_PHOTO)
    if options & PickerAssetOptions.VIDEO:
        kinds.add(MediaKind.VIDEO)
    return frozenset(kinds)


@dataclass
class FetchOptions:
    """Mutable fetch options, the counterpart of a platform fetch request."""

    sort_descriptors: List[SortDescriptor] = field(default_factory=list)
    media_kinds: Optional[FrozenSet[MediaKind]] = None

    @classmethod
    def for_configuration(cls, config: PickerConfiguration) -> "FetchOptions":
        options = cls(media_kinds=media_kinds_for(config.select_options))
        options.apply_configuration(config)
        return options

    def apply_configuration(self, config: PickerConfiguration) -> None:
        """Sort by creation date when *config* asks for it."""

        if config.creation_date:
            self.sort_descriptors = [SortDescriptor(CREATION_DATE_KEY, ascending=True)]

    def matches(self, asset: Asset) -> bool:
        return self.media_kinds is None or asset.media_kind in self.media_kinds

    def apply(self, assets: Iterable[Asset]) -> List[Asset]:
        """Filter *assets* by media kind and order them by the sort descriptors."""

        result = [asset for asset in assets if self.matches(asset)]
        # Stable sorts applied last-to-first give multi-key ordering.
        for descriptor in reversed(self.sort_descriptors):
            result.sort(
                key=lambda asset, key=descriptor.key: _sort_value(asset, key),
                reverse=not descriptor.ascending,
            )
        return result
