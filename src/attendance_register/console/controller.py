from __future__ import annotations

from flask import Flask

from ..common.http import login_required, ok, request_data
from ..container import Container
from .state import ConsoleState


def state_to_dict(state: ConsoleState) -> dict:
    return {
        "view": state.view.value,
        "selected_class_id": state.selected_class_id,
        "month_index": state.month_index,
        "has_sheet": state.sheet is not None,
        "unsaved_changes": state.dirty,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    @login_required
    def dashboard():
        stats = container.console.stats()
        institute = container.institute_service.get()
        return ok(
            institute={"name": institute.name, "address": institute.address},
            stats={"classes": stats.classes, "students": stats.students, "holidays": stats.holidays},
        )

    @app.route("/api/console", methods=["GET"], endpoint="console_state")
    @login_required
    def console_state():
        return ok(state=state_to_dict(container.console.state))

    @app.route("/api/console/view", methods=["POST"], endpoint="console_view")
    @login_required
    def console_view():
        state = container.console.select_view(request_data().get("view", ""))
        return ok(state=state_to_dict(state))

    @app.route("/api/console/load", methods=["POST"], endpoint="console_load")
    @login_required
    def console_load():
        return ok(state=state_to_dict(container.console.load()))
