from __future__ import annotations

from typing import Sequence

from ..core.enums import StoreKey
from ..database.record_store import RecordStore
from .model import Holiday
from .repository import HolidayRepository


class StoreHolidayRepository(HolidayRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def list_all(self) -> Sequence[Holiday]:
        rows = self._store.get(StoreKey.HOLIDAYS, [])
        return [Holiday(holiday_id=r["id"], date=r["date"], name=r.get("name", "")) for r in rows]

    def save_all(self, holidays: Sequence[Holiday]) -> None:
        self._store.save(
            StoreKey.HOLIDAYS,
            [{"id": h.holiday_id, "date": h.date, "name": h.name} for h in holidays],
        )
