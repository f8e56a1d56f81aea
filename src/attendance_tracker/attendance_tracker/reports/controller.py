from __future__ import annotations

import io
import logging

from flask import Flask, jsonify, request, send_file

from ..common.datetime_utils import today_iso
from ..container import Container
from ..core.constants import ALL_SECTIONS
from ..core.exceptions import EmptyResultError, ValidationError
from .model import ReportData

logger = logging.getLogger(__name__)


def report_json(data: ReportData) -> dict:
    s = data.stats
    return {
        "stats": {
            "totalRecords": s.total_records,
            "presentCount": s.present_count,
            "absentCount": s.absent_count,
            "distinctStudents": s.distinct_students,
            "rate": s.rate,
        },
        "rows": [
            {
                "date": r.date,
                "studentId": r.student_id,
                "studentName": r.student_name,
                "sectionId": r.section_id,
                "sectionName": r.section_name,
                "sectionColor": r.section_color,
                "present": r.present,
            }
            for r in data.rows
        ],
    }


def register(app: Flask, container: Container) -> None:
    def _filters():
        # Missing bounds default to today; an explicit empty value means unbounded.
        today = today_iso()
        return (
            request.args.get("from", today),
            request.args.get("to", today),
            request.args.get("section") or ALL_SECTIONS,
        )

    @app.route("/api/reports", methods=["GET"], endpoint="report_preview")
    def report_preview():
        from_date, to_date, section = _filters()
        try:
            data = container.report_service.build_report(from_date, to_date, section)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify(report_json(data))

    @app.route("/api/reports/export.<fmt>", methods=["GET"], endpoint="report_export")
    def report_export(fmt: str):
        from_date, to_date, section = _filters()
        try:
            out = container.export_service.export(fmt, from_date, to_date, section)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except EmptyResultError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except Exception:
            logger.exception("export %s failed", fmt)
            return jsonify({"success": False, "message": "Could not export report"}), 500

        return send_file(
            io.BytesIO(out.content),
            mimetype=out.mimetype,
            as_attachment=True,
            download_name=out.filename,
        )
