"""Serialize ``TrackerState`` to and from a key-value byte store.

Five entries are kept: ``students``, ``sections`` and ``attendance`` as JSON
arrays using the camelCase field names of the browser app, and
``language`` / ``theme`` as plain UTF-8 text. Reads never fail: a missing or
unparsable entry falls back to its default.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, List, Optional, Set, Tuple

from ..attendance.model import AttendanceRecord
from ..common.ids import new_id
from ..core.constants import (
    ATTENDANCE_KEY,
    DEFAULT_LANGUAGE,
    DEFAULT_SECTIONS,
    DEFAULT_THEME,
    LANGUAGE_KEY,
    SECTIONS_KEY,
    STUDENTS_KEY,
    THEME_KEY,
)
from ..core.enums import Language, Theme
from ..sections.model import Section
from ..state import TrackerState
from ..students.model import Student
from .repository import KeyValueStore

logger = logging.getLogger(__name__)


def default_sections() -> List[Section]:
    return [Section(section_id=new_id(), name=name, color=color) for name, color in DEFAULT_SECTIONS]


def student_to_dict(s: Student) -> dict:
    return {"id": s.student_id, "name": s.name, "sectionIds": list(s.section_ids)}


def section_to_dict(s: Section) -> dict:
    return {"id": s.section_id, "name": s.name, "color": s.color}


def record_to_dict(r: AttendanceRecord) -> dict:
    return {
        "id": r.record_id,
        "studentId": r.student_id,
        "sectionId": r.section_id,
        "date": r.date,
        "present": r.present,
    }


def student_from_dict(d: Dict[str, Any]) -> Student:
    section_ids = d.get("sectionIds") or []
    if not isinstance(section_ids, list):
        raise ValueError("sectionIds must be a list")
    return Student(
        student_id=str(d["id"]),
        name=str(d["name"]),
        section_ids=tuple(str(sid) for sid in section_ids),
    )


def section_from_dict(d: Dict[str, Any]) -> Section:
    return Section(section_id=str(d["id"]), name=str(d["name"]), color=str(d.get("color") or ""))


def record_from_dict(d: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=str(d["id"]),
        student_id=str(d["studentId"]),
        section_id=str(d["sectionId"]),
        date=str(d["date"]),
        present=bool(d.get("present", False)),
    )


class PersistentStoreAdapter:
    def __init__(self, store: KeyValueStore):
        self._store = store

    def _read_list(self, key: str) -> Optional[list]:
        try:
            raw = self._store.get(key)
        except Exception:
            logger.warning("could not read %r from store, using defaults", key, exc_info=True)
            return None
        if raw is None:
            return None
        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, ValueError):
            logger.warning("stored %r is not valid JSON, using defaults", key)
            return None
        if data is None:
            return None
        if not isinstance(data, list):
            logger.warning("stored %r is not a list, using defaults", key)
            return None
        return data

    def _read_text(self, key: str, default: str, allowed: Set[str]) -> str:
        try:
            raw = self._store.get(key)
        except Exception:
            logger.warning("could not read %r from store, using default", key, exc_info=True)
            return default
        if not raw:
            return default
        try:
            value = raw.decode("utf-8").strip()
        except UnicodeDecodeError:
            return default
        return value if value in allowed else default

    @staticmethod
    def _decode_items(key: str, items: list, decode: Callable[[Dict[str, Any]], Any]) -> list:
        out = []
        for item in items:
            try:
                if not isinstance(item, dict):
                    raise TypeError("not an object")
                out.append(decode(item))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("skipping malformed %s entry %r: %s", key, item, e)
        return out

    def load(self) -> TrackerState:
        students_raw = self._read_list(STUDENTS_KEY)
        sections_raw = self._read_list(SECTIONS_KEY)
        attendance_raw = self._read_list(ATTENDANCE_KEY)

        students = self._decode_items(STUDENTS_KEY, students_raw or [], student_from_dict)
        if sections_raw is None:
            sections = default_sections()
        else:
            sections = self._decode_items(SECTIONS_KEY, sections_raw, section_from_dict)
        records = self._decode_items(ATTENDANCE_KEY, attendance_raw or [], record_from_dict)

        state = TrackerState(
            language=self._read_text(LANGUAGE_KEY, DEFAULT_LANGUAGE, {lang.value for lang in Language}),
            theme=self._read_text(THEME_KEY, DEFAULT_THEME, {t.value for t in Theme}),
        )
        for s in students:
            state.students[s.student_id] = s
        for s in sections:
            state.sections[s.section_id] = s

        seen: Set[Tuple[str, str, str]] = set()
        for r in records:
            triple = (r.student_id, r.section_id, r.date)
            if triple in seen:
                logger.warning("dropping duplicate attendance record %s for %s", r.record_id, triple)
                continue
            seen.add(triple)
            state.attendance[r.record_id] = r

        logger.info(
            "loaded %d students, %d sections, %d attendance records",
            len(state.students),
            len(state.sections),
            len(state.attendance),
        )
        return state

    def dump(self, state: TrackerState) -> Dict[str, bytes]:
        """Encode every entry without writing it."""

        def _json(items: list) -> bytes:
            return json.dumps(items, ensure_ascii=False).encode("utf-8")

        return {
            STUDENTS_KEY: _json([student_to_dict(s) for s in state.students.values()]),
            SECTIONS_KEY: _json([section_to_dict(s) for s in state.sections.values()]),
            ATTENDANCE_KEY: _json([record_to_dict(r) for r in state.attendance.values()]),
            LANGUAGE_KEY: state.language.encode("utf-8"),
            THEME_KEY: state.theme.encode("utf-8"),
        }

    def save(self, state: TrackerState) -> None:
        for key, value in self.dump(state).items():
            self._store.set(key, value)
        logger.debug("saved tracker state")
