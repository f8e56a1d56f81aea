from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import ValidationError
from .model import Student, StudentView

logger = logging.getLogger(__name__)


def student_view_json(v: StudentView) -> dict:
    return {
        "id": v.student_id,
        "name": v.name,
        "sections": [{"id": t.section_id, "name": t.name, "color": t.color} for t in v.sections],
    }


def student_json(s: Student) -> dict:
    return {"id": s.student_id, "name": s.name, "sectionIds": list(s.section_ids)}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students", methods=["GET"], endpoint="students_list")
    def students_list():
        views = container.student_service.students_view(request.args.get("q", ""))
        return jsonify({"students": [student_view_json(v) for v in views]})

    @app.route("/api/students", methods=["POST"], endpoint="students_save")
    def students_save():
        data = request.get_json(silent=True) or {}
        student_id = data.get("id") or None
        try:
            student = container.student_service.create_or_update_student(
                name=data.get("name", ""),
                section_ids=data.get("sectionIds") or [],
                student_id=student_id,
            )
            container.save()
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("saving student failed")
            return jsonify({"success": False, "message": "Could not save student"}), 500

        return jsonify({"success": True, "student": student_json(student)}), (200 if student_id else 201)

    @app.route("/api/students/<student_id>", methods=["DELETE"], endpoint="students_delete")
    def students_delete(student_id: str):
        try:
            deleted = container.student_service.delete_student(student_id)
            if deleted:
                container.save()
        except Exception:
            logger.exception("deleting student %s failed", student_id)
            return jsonify({"success": False, "message": "Could not delete student"}), 500

        if not deleted:
            return jsonify({"success": False, "message": "Student not found"}), 404
        return jsonify({"success": True})
