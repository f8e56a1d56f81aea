from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterator

from ..common.ids import new_id
from ..core.constants import ALL_SECTIONS
from ..core.enums import AttendanceMark
from ..sections.repository import SectionRepository
from ..students.repository import StudentRepository
from .model import AttendanceRecord, AttendanceRow
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        sections: SectionRepository,
    ):
        self._attendance = attendance
        self._students = students
        self._sections = sections

    def upsert_attendance(self, *, student_id: str, section_id: str, date: str, present: bool) -> AttendanceRecord:
        """Set the mark for one triple, replacing an existing record if any."""
        existing = self._attendance.find(student_id=student_id, section_id=section_id, date=date)
        if existing:
            record = replace(existing, present=bool(present))
            self._attendance.replace(record)
        else:
            record = AttendanceRecord(
                record_id=new_id(),
                student_id=student_id,
                section_id=section_id,
                date=date,
                present=bool(present),
            )
            self._attendance.add(record)

        logger.debug("attendance %s/%s/%s -> %s", student_id, section_id, date, record.present)
        return record

    def get_mark(self, *, student_id: str, section_id: str, date: str) -> AttendanceMark:
        record = self._attendance.find(student_id=student_id, section_id=section_id, date=date)
        if record is None:
            return AttendanceMark.UNMARKED
        return AttendanceMark.PRESENT if record.present else AttendanceMark.ABSENT

    def attendance_view(
        self,
        date: str,
        section_filter: str = ALL_SECTIONS,
        name_search: str = "",
    ) -> Iterator[AttendanceRow]:
        """Yield one row per (student, section) pair for ``date``.

        Pairs whose section no longer exists are skipped.
        """
        needle = (name_search or "").lower()
        sections = {s.section_id: s for s in self._sections.list_all()}

        for student in self._students.list_all():
            if needle and needle not in student.name.lower():
                continue
            for section_id in student.section_ids:
                section = sections.get(section_id)
                if not section:
                    continue
                if section_filter not in (None, "", ALL_SECTIONS) and section_id != section_filter:
                    continue
                yield AttendanceRow(
                    student_id=student.student_id,
                    student_name=student.name,
                    section_id=section_id,
                    section_name=section.name,
                    section_color=section.color,
                    date=date,
                    mark=self.get_mark(student_id=student.student_id, section_id=section_id, date=date),
                )
