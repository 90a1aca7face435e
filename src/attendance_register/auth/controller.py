from __future__ import annotations

from flask import Flask, session

from ..common.http import AUTH_FLAG, ok, request_data
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = request_data()
        username = container.auth_service.authenticate(data.get("username", ""), data.get("password", ""))

        session.permanent = True
        session[AUTH_FLAG] = True
        app.logger.info("admin %s logged in", username)
        return ok(message="Logged in.")

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.pop(AUTH_FLAG, None)
        return ok(message="Logged out.")

    @app.route("/api/session", methods=["GET"], endpoint="session_status")
    def session_status():
        return ok(authenticated=bool(session.get(AUTH_FLAG)))
