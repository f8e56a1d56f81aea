from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Student:
    """Domain entity: a student and the sections they belong to.

    ``section_ids`` may hold ids of sections that no longer exist; readers
    skip those silently.
    """

    student_id: str
    name: str
    section_ids: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SectionTag:
    section_id: str
    name: str
    color: str


@dataclass(frozen=True)
class StudentView:
    """Read-model for the roster: student plus resolved section tags."""

    student_id: str
    name: str
    sections: Tuple[SectionTag, ...]
