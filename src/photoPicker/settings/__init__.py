"""Persistent settings storage."""

from .manager import SettingsManager

__all__ = ["SettingsManager"]
