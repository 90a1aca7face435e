from __future__ import annotations

from typing import Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def save_all(self, students: Sequence[Student]) -> None:
        """Replace the whole student collection."""

        raise NotImplementedError
