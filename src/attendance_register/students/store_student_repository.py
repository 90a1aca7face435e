from __future__ import annotations

from typing import Sequence

from ..core.enums import StoreKey
from ..database.record_store import RecordStore
from .model import Student
from .repository import StudentRepository


class StoreStudentRepository(StudentRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def list_all(self) -> Sequence[Student]:
        rows = self._store.get(StoreKey.STUDENTS, [])
        return [
            Student(
                student_pk=r["id"],
                student_id=r.get("student_id", ""),
                name=r.get("name", ""),
                father_name=r.get("father_name", ""),
                mother_name=r.get("mother_name", ""),
                class_id=r["class_id"],
            )
            for r in rows
        ]

    def save_all(self, students: Sequence[Student]) -> None:
        self._store.save(
            StoreKey.STUDENTS,
            [
                {
                    "id": s.student_pk,
                    "student_id": s.student_id,
                    "name": s.name,
                    "father_name": s.father_name,
                    "mother_name": s.mother_name,
                    "class_id": s.class_id,
                }
                for s in students
            ],
        )
