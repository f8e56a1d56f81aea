from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def find(self, *, student_id: str, section_id: str, date: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def add(self, record: AttendanceRecord) -> None:
        raise NotImplementedError

    def replace(self, record: AttendanceRecord) -> bool:
        raise NotImplementedError

    def delete_for_student(self, student_id: str) -> int:
        """Delete every record of a student; returns how many were removed."""

        raise NotImplementedError

    def delete_for_section(self, section_id: str) -> int:
        raise NotImplementedError

    def list_range(
        self,
        *,
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
        section_id: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        """Records with ``from_date <= date <= to_date``; ``None`` bounds are open."""

        raise NotImplementedError
