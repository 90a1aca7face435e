from __future__ import annotations

from typing import Protocol, Sequence

from .model import ClassInfo


class ClassRepository(Protocol):
    def list_all(self) -> Sequence[ClassInfo]:
        raise NotImplementedError

    def save_all(self, classes: Sequence[ClassInfo]) -> None:
        """Replace the whole class collection."""

        raise NotImplementedError
