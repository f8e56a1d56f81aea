from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import ValidationError
from .model import Preferences


def prefs_json(p: Preferences) -> dict:
    return {"language": p.language, "theme": p.theme}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/preferences", methods=["GET"], endpoint="preferences_get")
    def preferences_get():
        return jsonify(prefs_json(container.preferences_service.get()))

    @app.route("/api/preferences", methods=["POST"], endpoint="preferences_set")
    def preferences_set():
        data = request.get_json(silent=True) or {}
        try:
            prefs = container.preferences_service.update(
                language=data.get("language"),
                theme=data.get("theme"),
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        container.save()
        return jsonify(prefs_json(prefs))

    @app.route("/api/preferences/theme/toggle", methods=["POST"], endpoint="preferences_toggle_theme")
    def preferences_toggle_theme():
        prefs = container.preferences_service.toggle_theme()
        container.save()
        return jsonify(prefs_json(prefs))
