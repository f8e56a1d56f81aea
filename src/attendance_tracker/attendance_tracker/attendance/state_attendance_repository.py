from __future__ import annotations

from typing import Optional, Sequence

from ..state import TrackerState
from .model import AttendanceRecord
from .repository import AttendanceRepository


class StateAttendanceRepository(AttendanceRepository):
    def __init__(self, state: TrackerState):
        self._state = state

    def list_all(self) -> Sequence[AttendanceRecord]:
        return list(self._state.attendance.values())

    def find(self, *, student_id: str, section_id: str, date: str) -> Optional[AttendanceRecord]:
        for r in self._state.attendance.values():
            if r.student_id == student_id and r.section_id == section_id and r.date == date:
                return r
        return None

    def add(self, record: AttendanceRecord) -> None:
        self._state.attendance[record.record_id] = record

    def replace(self, record: AttendanceRecord) -> bool:
        if record.record_id not in self._state.attendance:
            return False
        self._state.attendance[record.record_id] = record
        return True

    def _delete_where(self, predicate) -> int:
        doomed = [rid for rid, r in self._state.attendance.items() if predicate(r)]
        for rid in doomed:
            del self._state.attendance[rid]
        return len(doomed)

    def delete_for_student(self, student_id: str) -> int:
        return self._delete_where(lambda r: r.student_id == student_id)

    def delete_for_section(self, section_id: str) -> int:
        return self._delete_where(lambda r: r.section_id == section_id)

    def list_range(
        self,
        *,
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
        section_id: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        out = []
        for r in self._state.attendance.values():
            if from_date and r.date < from_date:
                continue
            if to_date and r.date > to_date:
                continue
            if section_id is not None and r.section_id != section_id:
                continue
            out.append(r)
        return out
