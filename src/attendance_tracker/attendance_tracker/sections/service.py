from __future__ import annotations

import logging
from typing import List, Optional

from ..attendance.repository import AttendanceRepository
from ..common.ids import new_id
from ..common.validators import optional_text, require_non_empty
from ..core.constants import DEFAULT_SECTION_COLOR
from ..core.exceptions import ValidationError
from ..students.repository import StudentRepository
from .model import Section, SectionView
from .repository import SectionRepository

logger = logging.getLogger(__name__)


class SectionService:
    """Use case: manage sections and cascade their removal."""

    def __init__(
        self,
        sections: SectionRepository,
        students: StudentRepository,
        attendance: AttendanceRepository,
    ):
        self._sections = sections
        self._students = students
        self._attendance = attendance

    def create_or_update_section(
        self,
        *,
        name: str,
        color: Optional[str] = None,
        section_id: Optional[str] = None,
    ) -> Section:
        name = require_non_empty(name, "Section name")
        color = optional_text(color, "Color") or DEFAULT_SECTION_COLOR

        if section_id:
            if not self._sections.get_by_id(section_id):
                raise ValidationError("Section does not exist")
            section = Section(section_id=section_id, name=name, color=color)
            self._sections.replace(section)
            logger.info("updated section %s", section_id)
            return section

        section = Section(section_id=new_id(), name=name, color=color)
        self._sections.add(section)
        logger.info("created section %s (%s)", section.section_id, name)
        return section

    def delete_section(self, section_id: str) -> bool:
        if not self._sections.delete_by_id(section_id):
            return False
        touched = self._students.remove_section_everywhere(section_id)
        removed = self._attendance.delete_for_section(section_id)
        logger.info(
            "deleted section %s (%d students updated, %d attendance records)",
            section_id,
            touched,
            removed,
        )
        return True

    def sections_view(self) -> List[SectionView]:
        students = self._students.list_all()
        return [
            SectionView(
                section_id=s.section_id,
                name=s.name,
                color=s.color,
                student_count=sum(1 for st in students if s.section_id in st.section_ids),
            )
            for s in self._sections.list_all()
        ]
