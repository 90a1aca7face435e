from __future__ import annotations

import logging
from dataclasses import replace
from typing import Sequence

from ..classes.repository import ClassRepository
from ..common.ids import generate_id
from ..common.validators import optional_text, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from .importer import parse_roster
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


def roster_order(students: Sequence[Student]) -> list[Student]:
    """Order students by name, ignoring case, like a printed register."""
    return sorted(students, key=lambda s: (s.name.casefold(), s.name))


class StudentService:
    def __init__(self, students: StudentRepository, classes: ClassRepository):
        self._students = students
        self._classes = classes

    def _require_class(self, class_id: str) -> None:
        if not class_id:
            raise ValidationError("Please select a class first.")
        if not any(c.class_id == class_id for c in self._classes.list_all()):
            raise NotFoundError("Class not found")

    def list_all(self) -> Sequence[Student]:
        return self._students.list_all()

    def list_for_class(self, class_id: str) -> list[Student]:
        return roster_order([s for s in self._students.list_all() if s.class_id == class_id])

    def get(self, student_pk: str) -> Student:
        for s in self._students.list_all():
            if s.student_pk == student_pk:
                return s
        raise NotFoundError("Student not found")

    def create(
        self,
        *,
        class_id: str,
        student_id: str,
        name: str,
        father_name: str = "",
        mother_name: str = "",
    ) -> Student:
        self._require_class(class_id)
        student = Student(
            student_pk=generate_id(),
            student_id=require_non_empty(student_id, "Student ID"),
            name=require_non_empty(name, "Name"),
            father_name=optional_text(father_name),
            mother_name=optional_text(mother_name),
            class_id=class_id,
        )
        self._students.save_all([*self._students.list_all(), student])
        return student

    def update(
        self,
        *,
        student_pk: str,
        student_id: str,
        name: str,
        father_name: str = "",
        mother_name: str = "",
    ) -> Student:
        student_id = require_non_empty(student_id, "Student ID")
        name = require_non_empty(name, "Name")

        students = list(self._students.list_all())
        for i, s in enumerate(students):
            if s.student_pk == student_pk:
                students[i] = replace(
                    s,
                    student_id=student_id,
                    name=name,
                    father_name=optional_text(father_name),
                    mother_name=optional_text(mother_name),
                )
                self._students.save_all(students)
                return students[i]
        raise NotFoundError("Student not found")

    def delete(self, *, student_pk: str) -> None:
        students = list(self._students.list_all())
        kept = [s for s in students if s.student_pk != student_pk]
        if len(kept) == len(students):
            raise NotFoundError("Student not found")
        self._students.save_all(kept)

    def import_roster(self, *, class_id: str, text: str) -> list[Student]:
        """Append every valid roster line to the class in one save.

        Nothing is written when the upload has no valid line.
        """

        self._require_class(class_id)
        parsed = parse_roster(text)
        created = [
            Student(
                student_pk=generate_id(),
                student_id=r.student_id,
                name=r.name,
                father_name=r.father_name,
                mother_name=r.mother_name,
                class_id=class_id,
            )
            for r in parsed
        ]
        self._students.save_all([*self._students.list_all(), *created])
        logger.info("imported %d students into class %s", len(created), class_id)
        return created
