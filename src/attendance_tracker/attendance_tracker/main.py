from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container
from .core.constants import DEFAULT_LOG_LEVEL
from .preferences.controller import register as register_preferences
from .reports.controller import register as register_reports
from .sections.controller import register as register_sections
from .storage.repository import KeyValueStore
from .students.controller import register as register_students

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None, *, store: Optional[KeyValueStore] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY", "dev")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=str(getattr(settings, "LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info(
        "settings=%s storage=%s",
        settings_module,
        getattr(settings, "STORAGE_BACKEND", "file") if store is None else type(store).__name__,
    )

    container = build_container(settings=settings, store=store)
    app.extensions["attendance_tracker"] = container

    register_students(app, container)
    register_sections(app, container)
    register_attendance(app, container)
    register_reports(app, container)
    register_preferences(app, container)

    return app
