from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import ValidationError
from .model import Section, SectionView

logger = logging.getLogger(__name__)


def section_json(s: Section) -> dict:
    return {"id": s.section_id, "name": s.name, "color": s.color}


def section_view_json(v: SectionView) -> dict:
    return {"id": v.section_id, "name": v.name, "color": v.color, "studentCount": v.student_count}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/sections", methods=["GET"], endpoint="sections_list")
    def sections_list():
        return jsonify({"sections": [section_view_json(v) for v in container.section_service.sections_view()]})

    @app.route("/api/sections", methods=["POST"], endpoint="sections_save")
    def sections_save():
        data = request.get_json(silent=True) or {}
        section_id = data.get("id") or None
        try:
            section = container.section_service.create_or_update_section(
                name=data.get("name", ""),
                color=data.get("color"),
                section_id=section_id,
            )
            container.save()
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("saving section failed")
            return jsonify({"success": False, "message": "Could not save section"}), 500

        return jsonify({"success": True, "section": section_json(section)}), (200 if section_id else 201)

    @app.route("/api/sections/<section_id>", methods=["DELETE"], endpoint="sections_delete")
    def sections_delete(section_id: str):
        try:
            deleted = container.section_service.delete_section(section_id)
            if deleted:
                container.save()
        except Exception:
            logger.exception("deleting section %s failed", section_id)
            return jsonify({"success": False, "message": "Could not delete section"}), 500

        if not deleted:
            return jsonify({"success": False, "message": "Section not found"}), 404
        return jsonify({"success": True})
