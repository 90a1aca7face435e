from __future__ import annotations

import logging
from dataclasses import replace
from typing import Sequence

from ..common.ids import generate_id
from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError
from ..students.repository import StudentRepository
from .model import ClassInfo
from .repository import ClassRepository

logger = logging.getLogger(__name__)


class ClassService:
    def __init__(self, classes: ClassRepository, students: StudentRepository):
        self._classes = classes
        self._students = students

    def list_all(self) -> Sequence[ClassInfo]:
        return self._classes.list_all()

    def get(self, class_id: str) -> ClassInfo:
        for c in self._classes.list_all():
            if c.class_id == class_id:
                return c
        raise NotFoundError("Class not found")

    def create(self, *, name: str) -> ClassInfo:
        cls = ClassInfo(class_id=generate_id(), name=require_non_empty(name, "Class name"))
        self._classes.save_all([*self._classes.list_all(), cls])
        return cls

    def rename(self, *, class_id: str, name: str) -> ClassInfo:
        name = require_non_empty(name, "Class name")
        classes = list(self._classes.list_all())
        for i, c in enumerate(classes):
            if c.class_id == class_id:
                classes[i] = replace(c, name=name)
                self._classes.save_all(classes)
                return classes[i]
        raise NotFoundError("Class not found")

    def delete(self, *, class_id: str) -> int:
        """Delete a class and every student enrolled in it.

        Dependents are saved first, then the class list. The two writes are
        independent: a failure in between leaves the class with no students,
        never students pointing at a deleted class. Returns the number of
        students removed.
        """

        classes = list(self._classes.list_all())
        remaining = [c for c in classes if c.class_id != class_id]
        if len(remaining) == len(classes):
            raise NotFoundError("Class not found")

        students = list(self._students.list_all())
        kept = [s for s in students if s.class_id != class_id]
        removed = len(students) - len(kept)
        if removed:
            self._students.save_all(kept)

        self._classes.save_all(remaining)
        logger.info("deleted class %s with %d students", class_id, removed)
        return removed
