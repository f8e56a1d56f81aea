from __future__ import annotations

import json

from attendance_tracker.storage.adapter import PersistentStoreAdapter
from attendance_tracker.storage.memory_store import MemoryKeyValueStore


def test_empty_store_loads_defaults():
    state = PersistentStoreAdapter(MemoryKeyValueStore()).load()

    assert state.students == {}
    assert state.attendance == {}
    assert [(s.name, s.color) for s in state.sections.values()] == [
        ("Art", "#f59e0b"),
        ("Sports", "#10b981"),
        ("Science", "#3b82f6"),
    ]
    assert len(set(state.sections)) == 3
    assert state.language == "en"
    assert state.theme == "light"


def test_save_uses_camelcase_field_names(art_and_ann):
    c = art_and_ann
    c.attendance_service.upsert_attendance(student_id="p1", section_id="s1", date="2024-01-01", present=True)
    c.preferences_service.update(language="tr", theme="dark")
    c.save()

    assert json.loads(c.store.get("students")) == [{"id": "p1", "name": "Ann", "sectionIds": ["s1"]}]
    assert json.loads(c.store.get("sections")) == [{"id": "s1", "name": "Art", "color": "#f59e0b"}]
    (record,) = json.loads(c.store.get("attendance"))
    assert set(record) == {"id", "studentId", "sectionId", "date", "present"}
    assert c.store.get("language") == b"tr"
    assert c.store.get("theme") == b"dark"

    reloaded = PersistentStoreAdapter(c.store).load()
    assert reloaded.students == c.state.students
    assert reloaded.sections == c.state.sections
    assert reloaded.attendance == c.state.attendance
    assert (reloaded.language, reloaded.theme) == ("tr", "dark")


def test_corrupt_entries_fall_back_to_defaults():
    store = MemoryKeyValueStore(
        {
            "students": b"{not json",
            "sections": b'{"id": "x"}',
            "attendance": b"\xff\xfe",
            "language": b"xx",
            "theme": b"neon",
        }
    )
    state = PersistentStoreAdapter(store).load()

    assert state.students == {}
    assert [s.name for s in state.sections.values()] == ["Art", "Sports", "Science"]
    assert state.attendance == {}
    assert (state.language, state.theme) == ("en", "light")


def test_stored_empty_section_list_is_kept():
    state = PersistentStoreAdapter(MemoryKeyValueStore({"sections": b"[]"})).load()
    assert state.sections == {}


def test_malformed_items_are_skipped():
    students = [
        {"id": "p1", "name": "Ann", "sectionIds": ["s1"]},
        {"name": "no id"},
        {"id": "p2", "name": "Bob", "sectionIds": "s1"},
        "junk",
    ]
    store = MemoryKeyValueStore({"students": json.dumps(students).encode("utf-8")})

    state = PersistentStoreAdapter(store).load()
    assert list(state.students) == ["p1"]


def test_duplicate_attendance_triples_are_collapsed():
    records = [
        {"id": "a", "studentId": "p1", "sectionId": "s1", "date": "2024-01-01", "present": True},
        {"id": "b", "studentId": "p1", "sectionId": "s1", "date": "2024-01-01", "present": False},
    ]
    store = MemoryKeyValueStore({"attendance": json.dumps(records).encode("utf-8")})

    state = PersistentStoreAdapter(store).load()
    assert list(state.attendance) == ["a"]


class BrokenStore:
    def get(self, key):
        raise OSError("disk on fire")

    def set(self, key, value):
        raise OSError("disk on fire")


def test_read_failures_never_propagate():
    state = PersistentStoreAdapter(BrokenStore()).load()
    assert len(state.sections) == 3
    assert state.language == "en"
