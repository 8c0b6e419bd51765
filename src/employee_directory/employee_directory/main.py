from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .container import build_container
from .employees.controller import register as register_employees
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    latency_ms = tuple(getattr(settings, "STORE_LATENCY_MS", (200, 500)))
    container = build_container(
        latency_ms=latency_ms,
        seed=bool(getattr(settings, "SEED_DEMO_DATA", True)),
    )
    app.extensions["employee_directory"] = container
    logger.info("settings=%s store latency=%s-%sms", settings_module, *container.db.latency_ms)

    register_users(app, container)
    register_employees(app, container)

    @app.errorhandler(404)
    def not_found(_e):
        return jsonify({"success": False, "message": "Not found"}), 404

    return app
