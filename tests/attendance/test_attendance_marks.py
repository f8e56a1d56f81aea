from __future__ import annotations

from attendance_tracker.core.enums import AttendanceMark
from attendance_tracker.students.model import Student


def test_unmarked_row_reads_absent_then_present_after_upsert(art_and_ann):
    svc = art_and_ann.attendance_service

    (row,) = list(svc.attendance_view("2024-01-01", "all", ""))
    assert (row.student_name, row.section_name) == ("Ann", "Art")
    assert row.present is False
    assert row.mark == AttendanceMark.UNMARKED

    svc.upsert_attendance(student_id="p1", section_id="s1", date="2024-01-01", present=True)

    (row,) = list(svc.attendance_view("2024-01-01", "all", ""))
    assert row.present is True
    assert row.mark == AttendanceMark.PRESENT


def test_upsert_twice_keeps_single_record_with_last_value(art_and_ann):
    svc = art_and_ann.attendance_service
    first = svc.upsert_attendance(student_id="p1", section_id="s1", date="2024-01-01", present=True)
    second = svc.upsert_attendance(student_id="p1", section_id="s1", date="2024-01-01", present=False)

    records = art_and_ann.attendance_repo.list_all()
    assert len(records) == 1
    assert records[0].present is False
    assert first.record_id == second.record_id


def test_explicit_absent_differs_from_unmarked(art_and_ann):
    svc = art_and_ann.attendance_service
    svc.upsert_attendance(student_id="p1", section_id="s1", date="2024-01-01", present=False)

    assert svc.get_mark(student_id="p1", section_id="s1", date="2024-01-01") == AttendanceMark.ABSENT
    assert svc.get_mark(student_id="p1", section_id="s1", date="2024-01-02") == AttendanceMark.UNMARKED


def test_view_filters_by_section_and_name(art_and_ann):
    c = art_and_ann
    sports = c.section_service.create_or_update_section(name="Sports", color="#10b981")
    c.student_service.create_or_update_student(name="Ann", section_ids=["s1", sports.section_id], student_id="p1")
    c.student_service.create_or_update_student(name="Bob", section_ids=[sports.section_id])

    svc = c.attendance_service
    assert len(list(svc.attendance_view("2024-01-01"))) == 3
    assert [r.student_name for r in svc.attendance_view("2024-01-01", sports.section_id)] == ["Ann", "Bob"]
    assert [r.section_name for r in svc.attendance_view("2024-01-01", "all", "aN")] == ["Art", "Sports"]
    assert list(svc.attendance_view("2024-01-01", "s1", "bob")) == []


def test_view_skips_dangling_sections_and_is_lazy(art_and_ann):
    art_and_ann.state.students["p2"] = Student(student_id="p2", name="Cem", section_ids=("gone", "s1"))

    rows = art_and_ann.attendance_service.attendance_view("2024-01-01")
    assert iter(rows) is rows
    assert [(r.student_id, r.section_id) for r in rows] == [("p1", "s1"), ("p2", "s1")]
