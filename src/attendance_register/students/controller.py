from __future__ import annotations

from flask import Flask, request

from ..common.http import login_required, ok, request_data
from ..container import Container
from .model import Student


def _to_dict(s: Student) -> dict:
    return {
        "id": s.student_pk,
        "student_id": s.student_id,
        "name": s.name,
        "father_name": s.father_name,
        "mother_name": s.mother_name,
        "class_id": s.class_id,
    }


def _uploaded_text() -> str:
    upload = request.files.get("file")
    if upload is not None:
        return upload.read().decode("utf-8-sig", errors="replace")
    return request_data().get("text", "")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/classes/<class_id>/students", methods=["GET"], endpoint="students_list")
    @login_required
    def students_list(class_id: str):
        cls = container.class_service.get(class_id)
        students = container.student_service.list_for_class(class_id)
        return ok(class_name=cls.name, students=[_to_dict(s) for s in students])

    @app.route("/api/classes/<class_id>/students", methods=["POST"], endpoint="students_create")
    @login_required
    def students_create(class_id: str):
        data = request_data()
        student = container.student_service.create(
            class_id=class_id,
            student_id=data.get("student_id", ""),
            name=data.get("name", ""),
            father_name=data.get("father_name", ""),
            mother_name=data.get("mother_name", ""),
        )
        return ok(201, student=_to_dict(student), message="Students updated!")

    @app.route("/api/classes/<class_id>/students/import", methods=["POST"], endpoint="students_import")
    @login_required
    def students_import(class_id: str):
        created = container.student_service.import_roster(class_id=class_id, text=_uploaded_text())
        return ok(
            201,
            imported=len(created),
            students=[_to_dict(s) for s in created],
            message=f"{len(created)} students added successfully.",
        )

    @app.route("/api/students/<student_pk>", methods=["PUT"], endpoint="students_update")
    @login_required
    def students_update(student_pk: str):
        data = request_data()
        student = container.student_service.update(
            student_pk=student_pk,
            student_id=data.get("student_id", ""),
            name=data.get("name", ""),
            father_name=data.get("father_name", ""),
            mother_name=data.get("mother_name", ""),
        )
        return ok(student=_to_dict(student), message="Students updated!")

    @app.route("/api/students/<student_pk>", methods=["DELETE"], endpoint="students_delete")
    @login_required
    def students_delete(student_pk: str):
        container.student_service.delete(student_pk=student_pk)
        return ok(message="Students updated!")
