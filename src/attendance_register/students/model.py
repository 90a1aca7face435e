from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Student:
    """A student enrolled in one class.

    `student_pk` is the opaque record id; `student_id` is the identifier the
    institute prints on registers (unique per class by convention only).
    """

    student_pk: str
    student_id: str
    name: str
    father_name: str
    mother_name: str
    class_id: str


@dataclass(frozen=True)
class NewStudent:
    student_id: str
    name: str
    father_name: str
    mother_name: str
