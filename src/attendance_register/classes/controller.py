from __future__ import annotations

from flask import Flask

from ..common.http import login_required, ok, request_data
from ..console.controller import state_to_dict
from ..container import Container
from .model import ClassInfo


def _to_dict(cls: ClassInfo) -> dict:
    return {"id": cls.class_id, "name": cls.name}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/classes", methods=["GET"], endpoint="classes_list")
    @login_required
    def classes_list():
        return ok(classes=[_to_dict(c) for c in container.class_service.list_all()])

    @app.route("/api/classes", methods=["POST"], endpoint="classes_create")
    @login_required
    def classes_create():
        cls = container.class_service.create(name=request_data().get("name", ""))
        return ok(201, **{"class": _to_dict(cls), "message": "Classes updated!"})

    @app.route("/api/classes/<class_id>", methods=["PUT"], endpoint="classes_rename")
    @login_required
    def classes_rename(class_id: str):
        cls = container.class_service.rename(class_id=class_id, name=request_data().get("name", ""))
        return ok(**{"class": _to_dict(cls), "message": "Classes updated!"})

    @app.route("/api/classes/<class_id>", methods=["DELETE"], endpoint="classes_delete")
    @login_required
    def classes_delete(class_id: str):
        removed = container.class_service.delete(class_id=class_id)
        return ok(students_removed=removed, message="Classes updated!")

    @app.route("/api/classes/<class_id>/select", methods=["POST"], endpoint="classes_select")
    @login_required
    def classes_select(class_id: str):
        return ok(state=state_to_dict(container.console.select_class(class_id)))
