from __future__ import annotations

from ..common.validators import require_non_empty
from .model import Institute
from .repository import InstituteRepository


class InstituteService:
    def __init__(self, institutes: InstituteRepository):
        self._institutes = institutes

    def get(self) -> Institute:
        return self._institutes.get()

    def update(self, *, name: str, address: str) -> Institute:
        institute = Institute(
            name=require_non_empty(name, "Institute name"),
            address=require_non_empty(address, "Address"),
        )
        self._institutes.save(institute)
        return institute
