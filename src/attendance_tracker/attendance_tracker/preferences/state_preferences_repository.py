from __future__ import annotations

from ..state import TrackerState
from .model import Preferences
from .repository import PreferencesRepository


class StatePreferencesRepository(PreferencesRepository):
    def __init__(self, state: TrackerState):
        self._state = state

    def get(self) -> Preferences:
        return Preferences(language=self._state.language, theme=self._state.theme)

    def save(self, prefs: Preferences) -> None:
        self._state.language = prefs.language
        self._state.theme = prefs.theme
