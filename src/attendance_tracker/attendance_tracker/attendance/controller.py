from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import require_iso_date, today_iso
from ..common.validators import require_bool, require_non_empty
from ..container import Container
from ..core.constants import ALL_SECTIONS
from ..core.exceptions import ValidationError
from .model import AttendanceRow

logger = logging.getLogger(__name__)


def row_json(r: AttendanceRow) -> dict:
    return {
        "studentId": r.student_id,
        "studentName": r.student_name,
        "sectionId": r.section_id,
        "sectionName": r.section_name,
        "sectionColor": r.section_color,
        "date": r.date,
        "mark": r.mark.value,
        "present": r.present,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_sheet")
    def attendance_sheet():
        try:
            day = require_iso_date(request.args.get("date") or today_iso())
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        rows = container.attendance_service.attendance_view(
            day,
            request.args.get("section") or ALL_SECTIONS,
            request.args.get("q", ""),
        )
        return jsonify({"date": day, "rows": [row_json(r) for r in rows]})

    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_mark")
    def attendance_mark():
        data = request.get_json(silent=True) or {}
        try:
            record = container.attendance_service.upsert_attendance(
                student_id=require_non_empty(data.get("studentId"), "Student"),
                section_id=require_non_empty(data.get("sectionId"), "Section"),
                date=require_iso_date(data.get("date")),
                present=require_bool(data.get("present"), "Present"),
            )
            container.save()
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("marking attendance failed")
            return jsonify({"success": False, "message": "Could not save attendance"}), 500

        return jsonify({"success": True, "id": record.record_id, "present": record.present})
