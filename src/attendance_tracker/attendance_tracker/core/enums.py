from __future__ import annotations

from enum import Enum


class AttendanceMark(str, Enum):
    """Read result for one (student, section, date) triple."""

    PRESENT = "present"
    ABSENT = "absent"
    UNMARKED = "unmarked"


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


class Language(str, Enum):
    """Locales the static translation table ships."""

    EN = "en"
    PT = "pt"
    TR = "tr"


class ExportFormat(str, Enum):
    CSV = "csv"
    PDF = "pdf"
