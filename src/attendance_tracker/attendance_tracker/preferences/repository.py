from __future__ import annotations

from typing import Protocol

from .model import Preferences


class PreferencesRepository(Protocol):
    def get(self) -> Preferences:
        raise NotImplementedError

    def save(self, prefs: Preferences) -> None:
        raise NotImplementedError
