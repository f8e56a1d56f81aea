from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Section:
    """Domain entity: a named, colored group (class or activity)."""

    section_id: str
    name: str
    color: str


@dataclass(frozen=True)
class SectionView:
    section_id: str
    name: str
    color: str
    student_count: int
