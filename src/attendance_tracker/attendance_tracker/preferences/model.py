from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Preferences:
    language: str
    theme: str
