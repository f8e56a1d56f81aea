from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from ..common.validators import require_choice
from ..core.enums import Language, Theme
from .model import Preferences
from .repository import PreferencesRepository

logger = logging.getLogger(__name__)

LANGUAGES = [lang.value for lang in Language]
THEMES = [t.value for t in Theme]


class PreferencesService:
    """Use case: language and theme selection."""

    def __init__(self, prefs: PreferencesRepository):
        self._prefs = prefs

    def get(self) -> Preferences:
        return self._prefs.get()

    def update(self, *, language: Optional[str] = None, theme: Optional[str] = None) -> Preferences:
        """Validate both values first so a bad one changes nothing."""
        prefs = self._prefs.get()
        if language is not None:
            prefs = replace(prefs, language=require_choice(language, "Language", LANGUAGES))
        if theme is not None:
            prefs = replace(prefs, theme=require_choice(theme, "Theme", THEMES))
        self._prefs.save(prefs)
        logger.info("preferences: language=%s theme=%s", prefs.language, prefs.theme)
        return prefs

    def set_language(self, language: str) -> Preferences:
        return self.update(language=language)

    def set_theme(self, theme: str) -> Preferences:
        return self.update(theme=theme)

    def toggle_theme(self) -> Preferences:
        current = self._prefs.get().theme
        return self.set_theme(Theme.DARK.value if current == Theme.LIGHT.value else Theme.LIGHT.value)
