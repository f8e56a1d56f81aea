from __future__ import annotations

import pytest

from attendance_tracker.core.constants import DEFAULT_SECTION_COLOR
from attendance_tracker.core.exceptions import ValidationError


def test_create_section_requires_name(container):
    with pytest.raises(ValidationError):
        container.section_service.create_or_update_section(name="  ", color="#000000")
    assert container.state.sections == {}


def test_create_section_defaults_color(container):
    section = container.section_service.create_or_update_section(name="Music")
    assert section.color == DEFAULT_SECTION_COLOR


def test_update_section_in_place(art_and_ann):
    svc = art_and_ann.section_service
    svc.create_or_update_section(name="Sports", color="#10b981")

    updated = svc.create_or_update_section(name="Fine Art", color="#ff0000", section_id="s1")

    assert updated.section_id == "s1"
    assert [v.name for v in svc.sections_view()] == ["Fine Art", "Sports"]


def test_update_unknown_section_fails(container):
    with pytest.raises(ValidationError):
        container.section_service.create_or_update_section(name="X", section_id="missing")


def test_sections_view_counts_members(art_and_ann):
    c = art_and_ann
    sports = c.section_service.create_or_update_section(name="Sports", color="#10b981")
    c.student_service.create_or_update_student(name="Bob", section_ids=["s1", sports.section_id])

    counts = {v.name: v.student_count for v in c.section_service.sections_view()}
    assert counts == {"Art": 2, "Sports": 1}


def test_delete_section_cascades(art_and_ann):
    c = art_and_ann
    c.attendance_service.upsert_attendance(student_id="p1", section_id="s1", date="2024-01-01", present=True)

    assert c.section_service.delete_section("s1") is True

    assert c.section_service.sections_view() == []
    (ann,) = c.student_service.students_view()
    assert ann.name == "Ann"
    assert ann.sections == ()
    assert c.state.students["p1"].section_ids == ()
    assert c.report_service.report_view(None, None, "s1") == []
    assert c.attendance_repo.list_all() == []


def test_delete_section_keeps_other_sections_records(art_and_ann):
    c = art_and_ann
    sports = c.section_service.create_or_update_section(name="Sports", color="#10b981")
    c.student_service.create_or_update_student(name="Ann", section_ids=["s1", sports.section_id], student_id="p1")
    c.attendance_service.upsert_attendance(student_id="p1", section_id="s1", date="2024-01-01", present=True)
    c.attendance_service.upsert_attendance(student_id="p1", section_id=sports.section_id, date="2024-01-01", present=True)

    c.section_service.delete_section("s1")

    assert c.state.students["p1"].section_ids == (sports.section_id,)
    assert [r.section_id for r in c.attendance_repo.list_all()] == [sports.section_id]


def test_delete_unknown_section_is_noop(art_and_ann):
    assert art_and_ann.section_service.delete_section("missing") is False
    assert art_and_ann.state.students["p1"].section_ids == ("s1",)
