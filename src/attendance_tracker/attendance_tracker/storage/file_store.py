from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..core.constants import ATTENDANCE_KEY, SECTIONS_KEY, STUDENTS_KEY
from .repository import KeyValueStore

_JSON_KEYS = {STUDENTS_KEY, SECTIONS_KEY, ATTENDANCE_KEY}


class FileKeyValueStore(KeyValueStore):
    """One file per entry under ``data_dir``.

    Collections go to ``<key>.json``, scalars to ``<key>.txt``.
    """

    def __init__(self, data_dir):
        self._dir = Path(data_dir)

    def _path(self, key: str) -> Path:
        suffix = ".json" if key in _JSON_KEYS else ".txt"
        return self._dir / f"{key}{suffix}"

    def get(self, key: str) -> Optional[bytes]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_bytes()

    def set(self, key: str, value: bytes) -> None:
        self._dir.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        tmp = path.with_name(path.name + ".tmp")
        tmp.write_bytes(value)
        tmp.replace(path)
