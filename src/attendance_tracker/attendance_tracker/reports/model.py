from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ..attendance.model import AttendanceRecord


@dataclass(frozen=True)
class ReportStats:
    total_records: int
    present_count: int
    absent_count: int
    distinct_students: int
    rate: float


@dataclass(frozen=True)
class ReportRow:
    """Read-model for report tables and exports."""

    date: str
    student_id: str
    student_name: str
    section_id: str
    section_name: str
    section_color: str
    present: bool
    resolved: bool = True


@dataclass(frozen=True)
class ReportData:
    records: List[AttendanceRecord]
    rows: List[ReportRow]
    stats: ReportStats
    # Every record, dangling ones included with placeholder names.
    all_rows: List[ReportRow] = field(default_factory=list)
