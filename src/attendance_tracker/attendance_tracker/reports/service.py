from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import optional_iso_date
from ..core.constants import ALL_SECTIONS, MISSING_NAME
from ..core.exceptions import EmptyResultError
from ..sections.repository import SectionRepository
from ..students.repository import StudentRepository
from .model import ReportData, ReportRow, ReportStats

logger = logging.getLogger(__name__)


def percentage(part: int, total: int) -> float:
    """One-decimal percentage, halves rounded up; 0 when total is 0."""
    if not total:
        return 0
    value = Decimal(part * 100) / Decimal(total)
    return float(value.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def summarize(records: Sequence[AttendanceRecord]) -> ReportStats:
    """Aggregate counts; rate is a percentage with one decimal, 0 when empty."""
    total = len(records)
    present = sum(1 for r in records if r.present)
    rate = percentage(present, total)
    return ReportStats(
        total_records=total,
        present_count=present,
        absent_count=total - present,
        distinct_students=len({r.student_id for r in records}),
        rate=rate,
    )


class ReportService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        sections: SectionRepository,
    ):
        self._attendance = attendance
        self._students = students
        self._sections = sections

    def report_view(
        self,
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
        section_filter: str = ALL_SECTIONS,
    ) -> List[AttendanceRecord]:
        from_date = optional_iso_date(from_date, "From date")
        to_date = optional_iso_date(to_date, "To date")
        section_id = None if section_filter in (None, "", ALL_SECTIONS) else section_filter
        return list(self._attendance.list_range(from_date=from_date, to_date=to_date, section_id=section_id))

    def build_report(
        self,
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
        section_filter: str = ALL_SECTIONS,
        *,
        require_records: bool = False,
    ) -> ReportData:
        records = self.report_view(from_date, to_date, section_filter)
        if require_records and not records:
            raise EmptyResultError("No attendance records for the selected filters")

        students = {s.student_id: s for s in self._students.list_all()}
        sections = {s.section_id: s for s in self._sections.list_all()}

        all_rows: List[ReportRow] = []
        for r in sorted(records, key=lambda r: r.date, reverse=True):
            student = students.get(r.student_id)
            section = sections.get(r.section_id)
            all_rows.append(
                ReportRow(
                    date=r.date,
                    student_id=r.student_id,
                    student_name=student.name if student else MISSING_NAME,
                    section_id=r.section_id,
                    section_name=section.name if section else MISSING_NAME,
                    section_color=section.color if section else "",
                    present=r.present,
                    resolved=bool(student and section),
                )
            )
        rows = [row for row in all_rows if row.resolved]

        stats = summarize(records)
        logger.debug("report %s..%s section=%s -> %d records", from_date, to_date, section_filter, stats.total_records)
        return ReportData(records=records, rows=rows, all_rows=all_rows, stats=stats)
