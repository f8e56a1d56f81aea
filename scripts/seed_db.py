"""Seed demo students and a week of attendance into the configured store."""

from __future__ import annotations

import importlib
import sys
from datetime import date, timedelta
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src" / "attendance_tracker"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from config import get_settings_module

from attendance_tracker.container import build_container

DEMO_STUDENTS = ["Ana Souza", "Bruno Lima", "Can Yılmaz", "Deniz Kaya", "Emily Clark", "Felipe Rocha"]


def main(days: int = 7) -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)

    sections = container.section_service.sections_view()
    if not sections:
        for name, color in (("Art", "#f59e0b"), ("Sports", "#10b981")):
            container.section_service.create_or_update_section(name=name, color=color)
        sections = container.section_service.sections_view()

    existing = {v.name for v in container.student_service.students_view()}
    for i, name in enumerate(DEMO_STUDENTS):
        if name in existing:
            continue
        picked = [sections[i % len(sections)].section_id, sections[(i + 1) % len(sections)].section_id]
        container.student_service.create_or_update_student(name=name, section_ids=picked)

    today = date.today()
    for offset in range(days):
        day = (today - timedelta(days=offset)).isoformat()
        for n, row in enumerate(container.attendance_service.attendance_view(day)):
            container.attendance_service.upsert_attendance(
                student_id=row.student_id,
                section_id=row.section_id,
                date=day,
                present=(n + offset) % 4 != 0,
            )

    container.save()
    print(f"OK: Seeded {len(container.state.students)} students, {len(container.state.attendance)} attendance records")


if __name__ == "__main__":
    main()
