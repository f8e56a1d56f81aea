from __future__ import annotations

from typing import Optional, Sequence

from ..state import TrackerState
from .model import Section
from .repository import SectionRepository


class StateSectionRepository(SectionRepository):
    def __init__(self, state: TrackerState):
        self._state = state

    def list_all(self) -> Sequence[Section]:
        return list(self._state.sections.values())

    def get_by_id(self, section_id: str) -> Optional[Section]:
        return self._state.sections.get(section_id)

    def add(self, section: Section) -> None:
        self._state.sections[section.section_id] = section

    def replace(self, section: Section) -> bool:
        if section.section_id not in self._state.sections:
            return False
        self._state.sections[section.section_id] = section
        return True

    def delete_by_id(self, section_id: str) -> bool:
        return self._state.sections.pop(section_id, None) is not None
