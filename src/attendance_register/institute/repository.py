from __future__ import annotations

from typing import Protocol

from .model import Institute


class InstituteRepository(Protocol):
    def get(self) -> Institute:
        """Return the institute, or the placeholder profile when none is stored."""

        raise NotImplementedError

    def save(self, institute: Institute) -> None:
        raise NotImplementedError
