from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Repository interface for Student.

    Note (DIP): the service layer depends on this interface, not on a
    concrete storage.
    """

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def get_by_id(self, student_id: str) -> Optional[Student]:
        raise NotImplementedError

    def add(self, student: Student) -> None:
        raise NotImplementedError

    def replace(self, student: Student) -> bool:
        """Swap the stored student with the same id, keeping its position."""

        raise NotImplementedError

    def delete_by_id(self, student_id: str) -> bool:
        raise NotImplementedError

    def remove_section_everywhere(self, section_id: str) -> int:
        """Drop ``section_id`` from every student; returns students touched."""

        raise NotImplementedError
