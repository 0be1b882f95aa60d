"""Current preferred UI language."""

from __future__ import annotations

from PySide6.QtCore import QLocale


def preferred_language() -> str:
    """Return the user's first preferred UI language as a BCP 47 tag."""

    system = QLocale.system()
    languages = system.uiLanguages()
    if languages:
        return languages[0]
    return system.name().replace("_", "-")
