from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from .attendance.service import AttendanceService
from .attendance.state_attendance_repository import StateAttendanceRepository
from .core.constants import DEFAULT_DATA_DIR, DEFAULT_KV_TABLE, DEFAULT_STORAGE_BACKEND
from .export.service import ExportService
from .preferences.service import PreferencesService
from .preferences.state_preferences_repository import StatePreferencesRepository
from .reports.service import ReportService
from .sections.service import SectionService
from .sections.state_section_repository import StateSectionRepository
from .state import TrackerState
from .storage.adapter import PersistentStoreAdapter
from .storage.file_store import FileKeyValueStore
from .storage.memory_store import MemoryKeyValueStore
from .storage.repository import KeyValueStore
from .students.service import StudentService
from .students.state_student_repository import StateStudentRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    store: KeyValueStore
    storage: PersistentStoreAdapter
    state: TrackerState

    students_repo: StateStudentRepository
    sections_repo: StateSectionRepository
    attendance_repo: StateAttendanceRepository
    preferences_repo: StatePreferencesRepository

    student_service: StudentService
    section_service: SectionService
    attendance_service: AttendanceService
    report_service: ReportService
    preferences_service: PreferencesService
    export_service: ExportService

    def save(self) -> None:
        """Flush the whole state to the store."""
        self.storage.save(self.state)


def build_store(settings: Any = None) -> KeyValueStore:
    backend = str(getattr(settings, "STORAGE_BACKEND", DEFAULT_STORAGE_BACKEND)).lower()

    if backend == "memory":
        return MemoryKeyValueStore()

    if backend == "file":
        return FileKeyValueStore(getattr(settings, "DATA_DIR", DEFAULT_DATA_DIR))

    if backend == "mysql":
        from .database.connection import DatabaseConnection, as_db_config
        from .storage.mysql_store import MySQLKeyValueStore

        conn = DatabaseConnection.get_instance(as_db_config(dict(getattr(settings, "DB_CONFIG", {}))))
        store = MySQLKeyValueStore(conn, table=getattr(settings, "KV_TABLE", DEFAULT_KV_TABLE))
        store.ensure_table()
        return store

    raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r}")


def build_container(*, settings: Any = None, store: Optional[KeyValueStore] = None) -> Container:
    store = store if store is not None else build_store(settings)
    storage = PersistentStoreAdapter(store)
    state = storage.load()

    students_repo = StateStudentRepository(state)
    sections_repo = StateSectionRepository(state)
    attendance_repo = StateAttendanceRepository(state)
    preferences_repo = StatePreferencesRepository(state)

    student_service = StudentService(students_repo, sections_repo, attendance_repo)
    section_service = SectionService(sections_repo, students_repo, attendance_repo)
    attendance_service = AttendanceService(attendance_repo, students_repo, sections_repo)
    report_service = ReportService(attendance_repo, students_repo, sections_repo)
    preferences_service = PreferencesService(preferences_repo)
    export_service = ExportService(report_service, preferences_service)

    logger.debug("container ready (store=%s)", type(store).__name__)

    return Container(
        store=store,
        storage=storage,
        state=state,
        students_repo=students_repo,
        sections_repo=sections_repo,
        attendance_repo=attendance_repo,
        preferences_repo=preferences_repo,
        student_service=student_service,
        section_service=section_service,
        attendance_service=attendance_service,
        report_service=report_service,
        preferences_service=preferences_service,
        export_service=export_service,
    )
