"""Utility helpers shared across photoPicker."""
