from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Section


class SectionRepository(Protocol):
    def list_all(self) -> Sequence[Section]:
        raise NotImplementedError

    def get_by_id(self, section_id: str) -> Optional[Section]:
        raise NotImplementedError

    def add(self, section: Section) -> None:
        raise NotImplementedError

    def replace(self, section: Section) -> bool:
        raise NotImplementedError

    def delete_by_id(self, section_id: str) -> bool:
        raise NotImplementedError
