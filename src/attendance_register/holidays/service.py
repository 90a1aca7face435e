from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.datetime_utils import require_iso_date
from ..common.ids import generate_id
from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError
from .model import Holiday, HolidayToggle, ToggleAction
from .repository import HolidayRepository

logger = logging.getLogger(__name__)


def sort_by_date(holidays: Sequence[Holiday]) -> list[Holiday]:
    return sorted(holidays, key=lambda h: h.date)


class HolidayService:
    """Global holiday calendar. Every write keeps the collection sorted by date."""

    def __init__(self, holidays: HolidayRepository):
        self._holidays = holidays

    def _save(self, holidays: Sequence[Holiday]) -> list[Holiday]:
        ordered = sort_by_date(holidays)
        self._holidays.save_all(ordered)
        return ordered

    def list_all(self) -> list[Holiday]:
        return sort_by_date(self._holidays.list_all())

    def holiday_dates(self) -> frozenset[str]:
        return frozenset(h.date for h in self._holidays.list_all())

    def for_month(self, *, year: int, month: int) -> list[Holiday]:
        prefix = f"{year:04d}-{month:02d}-"
        return [h for h in self.list_all() if h.date.startswith(prefix)]

    def find_on_date(self, date_str: str) -> Optional[Holiday]:
        for h in self._holidays.list_all():
            if h.date == date_str:
                return h
        return None

    def create(self, *, date: str, name: str) -> Holiday:
        holiday = Holiday(
            holiday_id=generate_id(),
            date=require_iso_date(date),
            name=require_non_empty(name, "Holiday name"),
        )
        self._save([*self._holidays.list_all(), holiday])
        return holiday

    def update(self, *, holiday_id: str, date: str, name: str) -> Holiday:
        date = require_iso_date(date)
        name = require_non_empty(name, "Holiday name")

        holidays = list(self._holidays.list_all())
        for i, h in enumerate(holidays):
            if h.holiday_id == holiday_id:
                holidays[i] = Holiday(holiday_id=holiday_id, date=date, name=name)
                self._save(holidays)
                return holidays[i]
        raise NotFoundError("Holiday not found")

    def delete(self, *, holiday_id: str) -> None:
        holidays = list(self._holidays.list_all())
        kept = [h for h in holidays if h.holiday_id != holiday_id]
        if len(kept) == len(holidays):
            raise NotFoundError("Holiday not found")
        self._save(kept)

    def toggle(self, *, date: str, name: Optional[str] = None, confirm_removal: bool = False) -> HolidayToggle:
        """Flip the holiday status of one date.

        An existing holiday is removed only once confirmed. Otherwise a
        non-blank name declares a new holiday; a blank name changes nothing.
        """

        date = require_iso_date(date)
        existing = self.find_on_date(date)
        if existing:
            if not confirm_removal:
                return HolidayToggle(action=ToggleAction.CONFIRM, date=date, holiday=existing)
            self._save([h for h in self._holidays.list_all() if h.holiday_id != existing.holiday_id])
            logger.info("holiday %r removed from %s", existing.name, date)
            return HolidayToggle(action=ToggleAction.REMOVED, date=date, holiday=existing)

        name = (name or "").strip()
        if not name:
            return HolidayToggle(action=ToggleAction.UNCHANGED, date=date)

        holiday = Holiday(holiday_id=generate_id(), date=date, name=name)
        self._save([*self._holidays.list_all(), holiday])
        logger.info("holiday %r declared on %s", name, date)
        return HolidayToggle(action=ToggleAction.ADDED, date=date, holiday=holiday)
