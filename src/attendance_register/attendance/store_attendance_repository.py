from __future__ import annotations

from ..core.enums import StoreKey
from ..database.record_store import RecordStore
from .model import DailyAttendance, Overrides
from .repository import AttendanceRepository


class StoreAttendanceRepository(AttendanceRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def load_overrides(self) -> Overrides:
        raw = self._store.get(StoreKey.ATTENDANCE, {})
        return {
            student_pk: {date_str: DailyAttendance.from_dict(cell) for date_str, cell in days.items()}
            for student_pk, days in raw.items()
        }

    def save_overrides(self, overrides: Overrides) -> None:
        self._store.save(
            StoreKey.ATTENDANCE,
            {
                student_pk: {date_str: cell.to_dict() for date_str, cell in days.items()}
                for student_pk, days in overrides.items()
                if days
            },
        )
