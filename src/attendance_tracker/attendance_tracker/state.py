from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from .attendance.model import AttendanceRecord
from .core.constants import DEFAULT_LANGUAGE, DEFAULT_THEME
from .sections.model import Section
from .students.model import Student


@dataclass
class TrackerState:
    """Everything one tracker session owns.

    Collections are keyed by id; dict order is the stable display order.
    Access is single-threaded, so there is no locking.
    """

    students: Dict[str, Student] = field(default_factory=dict)
    sections: Dict[str, Section] = field(default_factory=dict)
    attendance: Dict[str, AttendanceRecord] = field(default_factory=dict)
    language: str = DEFAULT_LANGUAGE
    theme: str = DEFAULT_THEME
