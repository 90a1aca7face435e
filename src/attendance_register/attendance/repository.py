from __future__ import annotations

from typing import Protocol

from .model import Overrides


class AttendanceRepository(Protocol):
    """Persistence of the sparse override log (never the full grid)."""

    def load_overrides(self) -> Overrides:
        raise NotImplementedError

    def save_overrides(self, overrides: Overrides) -> None:
        raise NotImplementedError
