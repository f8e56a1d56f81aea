from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AttendanceMark


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one present/absent mark.

    At most one record exists per (student_id, section_id, date); ``date`` is
    an ISO ``YYYY-MM-DD`` string.
    """

    record_id: str
    student_id: str
    section_id: str
    date: str
    present: bool


@dataclass(frozen=True)
class AttendanceRow:
    """Read-model for the daily attendance sheet (one row per student/section)."""

    student_id: str
    student_name: str
    section_id: str
    section_name: str
    section_color: str
    date: str
    mark: AttendanceMark

    @property
    def present(self) -> bool:
        return self.mark == AttendanceMark.PRESENT
