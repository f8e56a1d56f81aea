from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.ids import new_id
from ..common.validators import require_non_empty, require_non_empty_ids
from ..core.exceptions import ValidationError
from ..sections.repository import SectionRepository
from .model import SectionTag, Student, StudentView
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class StudentService:
    """Use case: manage the student roster."""

    def __init__(
        self,
        students: StudentRepository,
        sections: SectionRepository,
        attendance: AttendanceRepository,
    ):
        self._students = students
        self._sections = sections
        self._attendance = attendance

    def create_or_update_student(
        self,
        *,
        name: str,
        section_ids: Sequence[str],
        student_id: Optional[str] = None,
    ) -> Student:
        name = require_non_empty(name, "Student name")
        ids = tuple(require_non_empty_ids(section_ids, "section"))

        if student_id:
            if not self._students.get_by_id(student_id):
                raise ValidationError("Student does not exist")
            student = Student(student_id=student_id, name=name, section_ids=ids)
            self._students.replace(student)
            logger.info("updated student %s", student_id)
            return student

        student = Student(student_id=new_id(), name=name, section_ids=ids)
        self._students.add(student)
        logger.info("created student %s", student.student_id)
        return student

    def delete_student(self, student_id: str) -> bool:
        if not self._students.delete_by_id(student_id):
            return False
        removed = self._attendance.delete_for_student(student_id)
        logger.info("deleted student %s (%d attendance records)", student_id, removed)
        return True

    def students_view(self, name_search: str = "") -> List[StudentView]:
        needle = (name_search or "").lower()
        sections = {s.section_id: s for s in self._sections.list_all()}

        out: List[StudentView] = []
        for student in self._students.list_all():
            if needle and needle not in student.name.lower():
                continue
            tags = tuple(
                SectionTag(section_id=sid, name=sections[sid].name, color=sections[sid].color)
                for sid in student.section_ids
                if sid in sections
            )
            out.append(StudentView(student_id=student.student_id, name=student.name, sections=tags))
        return out
