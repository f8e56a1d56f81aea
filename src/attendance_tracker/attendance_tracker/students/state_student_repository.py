from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..state import TrackerState
from .model import Student
from .repository import StudentRepository


class StateStudentRepository(StudentRepository):
    def __init__(self, state: TrackerState):
        self._state = state

    def list_all(self) -> Sequence[Student]:
        return list(self._state.students.values())

    def get_by_id(self, student_id: str) -> Optional[Student]:
        return self._state.students.get(student_id)

    def add(self, student: Student) -> None:
        self._state.students[student.student_id] = student

    def replace(self, student: Student) -> bool:
        if student.student_id not in self._state.students:
            return False
        self._state.students[student.student_id] = student
        return True

    def delete_by_id(self, student_id: str) -> bool:
        return self._state.students.pop(student_id, None) is not None

    def remove_section_everywhere(self, section_id: str) -> int:
        touched = 0
        for student in list(self._state.students.values()):
            if section_id in student.section_ids:
                kept = tuple(sid for sid in student.section_ids if sid != section_id)
                self._state.students[student.student_id] = replace(student, section_ids=kept)
                touched += 1
        return touched
