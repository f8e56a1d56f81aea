from __future__ import annotations

import io
from typing import List
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ..core.enums import ExportFormat
from ..i18n.translations import format_date, translate
from ..reports.model import ReportData
from .base import ReportExporter

HEADER_BLUE = colors.Color(59 / 255, 130 / 255, 246 / 255)
STRIPE = colors.HexColor("#f1f5f9")


def table_data(report: ReportData, language: str) -> List[List[str]]:
    """Header plus one line per record.

    Unlike the CSV, records whose student or section is gone stay in the
    table with a "-" placeholder, matching the stats line above it.
    """

    def t(key: str) -> str:
        return translate(key, language)

    data = [[t("date"), t("student"), t("section"), t("status")]]
    for row in report.all_rows:
        data.append(
            [
                format_date(row.date, language),
                row.student_name,
                row.section_name,
                t("present" if row.present else "absent"),
            ]
        )
    return data


class PdfReportExporter(ReportExporter):
    """Paginated A4 report: title, generated-on, stats line, striped table."""

    extension = ExportFormat.PDF.value
    mimetype = "application/pdf"

    def render(self, report: ReportData, *, language: str, generated_on: str) -> bytes:
        def t(key: str) -> str:
            return translate(key, language)

        styles = getSampleStyleSheet()
        stats = report.stats

        buf = io.BytesIO()
        doc = SimpleDocTemplate(
            buf,
            pagesize=A4,
            leftMargin=14 * mm,
            rightMargin=14 * mm,
            topMargin=16 * mm,
            bottomMargin=16 * mm,
            title=t("attendanceReport"),
        )

        story = [
            Paragraph(escape(t("attendanceReport")), styles["Title"]),
            Paragraph(escape(f"{t('generatedOn')}: {format_date(generated_on, language)}"), styles["Normal"]),
            Paragraph(
                escape(
                    f"{t('totalPresent')}: {stats.present_count} | "
                    f"{t('totalAbsent')}: {stats.absent_count} | "
                    f"{t('attendanceRate')}: {stats.rate}%"
                ),
                styles["Normal"],
            ),
            Spacer(1, 6 * mm),
        ]

        table = Table(table_data(report, language), repeatRows=1, hAlign="LEFT")
        table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, 0), HEADER_BLUE),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, STRIPE]),
                    ("GRID", (0, 0), (-1, -1), 0.25, colors.lightgrey),
                    ("FONTSIZE", (0, 0), (-1, -1), 9),
                    ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
                ]
            )
        )
        story.append(table)

        doc.build(story)
        return buf.getvalue()
