"""Seed a demo class, roster and holiday into the configured record store."""

from __future__ import annotations

import importlib

from attendance_register.config import get_settings_module
from attendance_register.container import build_container, build_store

DEMO_ROSTER = """StudentId,Name,FatherName,MotherName
S001,Aarav Sharma,Rakesh Sharma,Meena Sharma
S002,Diya Patel,Suresh Patel,Kavita Patel
S003,Kabir Singh,Harjeet Singh,Simran Kaur
"""


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(store=build_store(db_config=dict(settings.DB_CONFIG)))

    cls = container.class_service.create(name="Class 10-A")
    students = container.student_service.import_roster(class_id=cls.class_id, text=DEMO_ROSTER)
    container.holiday_service.create(date="2026-01-26", name="Republic Day")

    print(f"OK: Seeded class {cls.name!r} with {len(students)} students")


if __name__ == "__main__":
    main()
