"""Pillow based thumbnail loading shared by the backends."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from PIL import Image, ImageOps, UnidentifiedImageError

from ..utils.logging import logger


def load_thumbnail(path: Path, size: tuple[int, int]) -> Optional[Image.Image]:
    """Return an upright RGB thumbnail of *path* no larger than *size*.

    ``None`` is returned for files Pillow cannot decode (videos included).
    """

    try:
        with Image.open(path) as image:
            image = ImageOps.exif_transpose(image)
            image.thumbnail(size)
            return image.convert("RGB")
    except (OSError, UnidentifiedImageError, Image.DecompressionBombError) as exc:
        logger.debug("Cannot build thumbnail for %s: %s", path, exc)
        return None
