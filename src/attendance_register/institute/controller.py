from __future__ import annotations

from flask import Flask

from ..common.http import login_required, ok, request_data
from ..container import Container
from .model import Institute


def _to_dict(institute: Institute) -> dict:
    return {"name": institute.name, "address": institute.address}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/institute", methods=["GET"], endpoint="institute_get")
    @login_required
    def institute_get():
        return ok(institute=_to_dict(container.institute_service.get()))

    @app.route("/api/institute", methods=["PUT", "POST"], endpoint="institute_update")
    @login_required
    def institute_update():
        data = request_data()
        institute = container.institute_service.update(name=data.get("name", ""), address=data.get("address", ""))
        return ok(institute=_to_dict(institute), message="Institute info updated!")
