from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth
from .classes.controller import register as register_classes
from .config import get_settings_module
from .console.controller import register as register_console
from .container import Container, build_container, build_store
from .core.exceptions import (
    AuthenticationError,
    DomainError,
    ImportParseError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from .database.bootstrap import apply_schema
from .database.connection import DBConfig, DatabaseConnection
from .holidays.controller import register as register_holidays
from .institute.controller import register as register_institute
from .students.controller import register as register_students


def register_error_handlers(app: Flask) -> None:
    def _fail(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    @app.errorhandler(ValidationError)
    @app.errorhandler(ImportParseError)
    def handle_bad_request(e: DomainError):
        return _fail(str(e), 400)

    @app.errorhandler(AuthenticationError)
    def handle_auth(e: AuthenticationError):
        return _fail(str(e), 401)

    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        return _fail(str(e), 404)

    @app.errorhandler(StoreError)
    def handle_store(e: StoreError):
        app.logger.error("store failure: %s", e)
        return _fail(f"{e}. Please try again.", 503)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        # Let Flask render its own HTTP errors (404 for unknown routes, 405, ...)
        code = getattr(e, "code", None)
        if isinstance(code, int):
            return _fail(getattr(e, "description", str(e)), code)
        app.logger.exception("unhandled error")
        if app.config.get("DEBUG"):
            return _fail(f"System error: {e}", 500)
        return _fail("System error", 500)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.permanent_session_lifetime = timedelta(days=30)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        app.logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(DatabaseConnection.get_instance(DBConfig.from_dict(db_config)))

        container = build_container(
            store=build_store(
                db_config=db_config,
                latency_ms=int(getattr(settings, "STORE_LATENCY_MS", 0)),
                attendance_save_latency_ms=int(getattr(settings, "ATTENDANCE_SAVE_LATENCY_MS", 0)),
            ),
            admin_username=getattr(settings, "ADMIN_USERNAME", "admin"),
            admin_password=getattr(settings, "ADMIN_PASSWORD", "password"),
        )

    app.extensions["attendance_register"] = container

    register_error_handlers(app)
    register_auth(app, container)
    register_console(app, container)
    register_institute(app, container)
    register_classes(app, container)
    register_students(app, container)
    register_holidays(app, container)
    register_attendance(app, container)

    return app
