from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .analytics.controller import register as register_analytics
from .attendance.controller import register as register_attendance
from .container import build_container
from .leaves.controller import register as register_leaves
from .locations.controller import register as register_locations
from .movements.controller import register as register_movements
from .shifts.controller import register as register_shifts


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    logging.getLogger(__name__).info("[attendance-tracker] settings=%s", settings_module)

    container = build_container(settings=settings)
    app.extensions["container"] = container

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"success": True, "activeSessions": container.attendance_service.count_active()})

    register_locations(app, container)
    register_attendance(app, container)
    register_movements(app, container)
    register_leaves(app, container)
    register_shifts(app, container)
    register_analytics(app, container)

    return app
