from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .container import Container, build_container
from .attendance.controller import register as register_attendance
from .dashboard.controller import register as register_dashboard


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["SSE_KEEPALIVE_SECONDS"] = float(getattr(settings, "SSE_KEEPALIVE_SECONDS", 15))

    _configure_logging(str(getattr(settings, "LOG_LEVEL", "INFO")))

    if container is None:
        firestore_config = getattr(settings, "FIRESTORE_CONFIG")
        container = build_container(
            firestore_config=firestore_config,
            master_key=getattr(settings, "CHECKIN_MASTER_KEY"),
            timezone=getattr(settings, "TIMEZONE"),
        )
        app.logger.info(
            "settings=%s project=%s emulator=%s",
            settings_module,
            firestore_config.get("project_id") or "-",
            firestore_config.get("emulator_host") or "-",
        )

    register_attendance(app, container)
    register_dashboard(app, container)

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"}), 200

    return app
