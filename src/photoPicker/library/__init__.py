"""Photo library backends."""

from .base import PhotoLibrary
from .folder import FolderPhotoLibrary
from .memory import MemoryPhotoLibrary

__all__ = ["PhotoLibrary", "FolderPhotoLibrary", "MemoryPhotoLibrary"]
