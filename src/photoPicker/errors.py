"""Exception hierarchy for photoPicker."""

from __future__ import annotations


class PhotoPickerError(Exception):
    """Base class for every error raised by photoPicker."""


class SettingsInvalidError(PhotoPickerError):
    """The settings file or a configuration section could not be parsed."""


class LibraryUnavailableError(PhotoPickerError):
    """A photo library backend could not be read."""
