from __future__ import annotations

import pytest

from attendance_tracker.container import build_container
from attendance_tracker.sections.model import Section
from attendance_tracker.storage.memory_store import MemoryKeyValueStore
from attendance_tracker.students.model import Student


@pytest.fixture
def store():
    # An explicit empty section list skips the seeded defaults.
    return MemoryKeyValueStore({"sections": b"[]"})


@pytest.fixture
def container(store):
    return build_container(store=store)


@pytest.fixture
def art_and_ann(container):
    """Section s1 'Art' and student p1 'Ann' in it, no attendance yet."""
    container.state.sections["s1"] = Section(section_id="s1", name="Art", color="#f59e0b")
    container.state.students["p1"] = Student(student_id="p1", name="Ann", section_ids=("s1",))
    return container
