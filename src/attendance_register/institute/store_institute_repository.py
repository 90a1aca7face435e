from __future__ import annotations

from ..core.constants import DEFAULT_INSTITUTE
from ..core.enums import StoreKey
from ..database.record_store import RecordStore
from .model import Institute
from .repository import InstituteRepository


class StoreInstituteRepository(InstituteRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def get(self) -> Institute:
        raw = self._store.get(StoreKey.INSTITUTE, dict(DEFAULT_INSTITUTE))
        return Institute(name=raw.get("name", ""), address=raw.get("address", ""))

    def save(self, institute: Institute) -> None:
        self._store.save(StoreKey.INSTITUTE, {"name": institute.name, "address": institute.address})
