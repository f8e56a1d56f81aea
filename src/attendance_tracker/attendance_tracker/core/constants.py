"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

# Key-value store entry names (camelCase layout of the browser app).
STUDENTS_KEY = "students"
SECTIONS_KEY = "sections"
ATTENDANCE_KEY = "attendance"
LANGUAGE_KEY = "language"
THEME_KEY = "theme"

ALL_SECTIONS = "all"

DEFAULT_LANGUAGE = "en"
DEFAULT_THEME = "light"
DEFAULT_SECTION_COLOR = "#3b82f6"

# (name, color) of the sections seeded when nothing is stored yet.
DEFAULT_SECTIONS = (
    ("Art", "#f59e0b"),
    ("Sports", "#10b981"),
    ("Science", "#3b82f6"),
)

DEFAULT_STORAGE_BACKEND = "file"
DEFAULT_DATA_DIR = "data"
DEFAULT_KV_TABLE = "tracker_kv"
DEFAULT_LOG_LEVEL = "INFO"

EXPORT_FILENAME_PREFIX = "attendance_report"
# Printed in place of a student or section that no longer exists.
MISSING_NAME = "-"
