from __future__ import annotations

import logging
from typing import Mapping, Optional

from ..common.datetime_utils import today_iso
from ..common.validators import require_choice
from ..core.constants import ALL_SECTIONS, EXPORT_FILENAME_PREFIX
from ..preferences.service import PreferencesService
from ..reports.service import ReportService
from .base import ExportFile, ReportExporter
from .csv_exporter import CsvReportExporter
from .pdf_exporter import PdfReportExporter

logger = logging.getLogger(__name__)


def default_exporters() -> dict:
    return {e.extension: e for e in (CsvReportExporter(), PdfReportExporter())}


class ExportService:
    def __init__(
        self,
        reports: ReportService,
        preferences: PreferencesService,
        *,
        exporters: Optional[Mapping[str, ReportExporter]] = None,
    ):
        self._reports = reports
        self._preferences = preferences
        self._exporters = dict(exporters) if exporters is not None else default_exporters()

    def export(
        self,
        fmt: str,
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
        section_filter: str = ALL_SECTIONS,
        *,
        language: Optional[str] = None,
        today: Optional[str] = None,
    ) -> ExportFile:
        """Render the filtered report; raises EmptyResultError when nothing matches."""
        fmt = require_choice((fmt or "").lower(), "Export format", self._exporters.keys())
        exporter = self._exporters[fmt]

        report = self._reports.build_report(from_date, to_date, section_filter, require_records=True)
        today = today or today_iso()
        language = language or self._preferences.get().language

        content = exporter.render(report, language=language, generated_on=today)
        filename = f"{EXPORT_FILENAME_PREFIX}_{today}.{exporter.extension}"
        logger.info("exported %s (%d rows)", filename, len(report.rows))
        return ExportFile(filename=filename, mimetype=exporter.mimetype, content=content)
