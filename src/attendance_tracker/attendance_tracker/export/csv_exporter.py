from __future__ import annotations

import csv
import io

from ..core.enums import ExportFormat
from ..i18n.translations import format_date, translate
from ..reports.model import ReportData
from .base import ReportExporter


class CsvReportExporter(ReportExporter):
    """Title, generated-on line, blank line, then date,student,section,status."""

    extension = ExportFormat.CSV.value
    mimetype = "text/csv"

    def render(self, report: ReportData, *, language: str, generated_on: str) -> bytes:
        def t(key: str) -> str:
            return translate(key, language)

        out = io.StringIO()
        writer = csv.writer(out, lineterminator="\n")
        writer.writerow([t("attendanceReport")])
        writer.writerow([f"{t('generatedOn')}: {format_date(generated_on, language)}"])
        writer.writerow([])
        writer.writerow([t("date"), t("student"), t("section"), t("status")])
        for row in report.rows:
            writer.writerow(
                [
                    format_date(row.date, language),
                    row.student_name,
                    row.section_name,
                    t("present" if row.present else "absent"),
                ]
            )

        return out.getvalue().encode("utf-8-sig")
