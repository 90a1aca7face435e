from __future__ import annotations

from flask import Flask

from ..common.http import login_required, ok, request_data
from ..container import Container
from .model import Holiday


def holiday_to_dict(h: Holiday) -> dict:
    return {"id": h.holiday_id, "date": h.date, "name": h.name}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/holidays", methods=["GET"], endpoint="holidays_list")
    @login_required
    def holidays_list():
        return ok(holidays=[holiday_to_dict(h) for h in container.holiday_service.list_all()])

    @app.route("/api/holidays", methods=["POST"], endpoint="holidays_create")
    @login_required
    def holidays_create():
        data = request_data()
        holiday = container.holiday_service.create(date=data.get("date", ""), name=data.get("name", ""))
        return ok(201, holiday=holiday_to_dict(holiday), message="Holidays updated!")

    @app.route("/api/holidays/<holiday_id>", methods=["PUT"], endpoint="holidays_update")
    @login_required
    def holidays_update(holiday_id: str):
        data = request_data()
        holiday = container.holiday_service.update(
            holiday_id=holiday_id,
            date=data.get("date", ""),
            name=data.get("name", ""),
        )
        return ok(holiday=holiday_to_dict(holiday), message="Holidays updated!")

    @app.route("/api/holidays/<holiday_id>", methods=["DELETE"], endpoint="holidays_delete")
    @login_required
    def holidays_delete(holiday_id: str):
        container.holiday_service.delete(holiday_id=holiday_id)
        return ok(message="Holidays updated!")
