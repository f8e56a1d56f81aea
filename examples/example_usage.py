"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the use cases live in the services.
"""

from attendance_tracker.container import build_container
from attendance_tracker.storage.memory_store import MemoryKeyValueStore


def main():
    container = build_container(store=MemoryKeyValueStore())

    art = container.section_service.create_or_update_section(name="Art", color="#f59e0b")
    ann = container.student_service.create_or_update_student(name="Ann", section_ids=[art.section_id])
    container.attendance_service.upsert_attendance(
        student_id=ann.student_id,
        section_id=art.section_id,
        date="2024-01-01",
        present=True,
    )

    for row in container.attendance_service.attendance_view("2024-01-01"):
        print(row.student_name, row.section_name, row.mark.value)

    print(container.report_service.build_report("2024-01-01", "2024-01-31").stats)


if __name__ == "__main__":
    main()
