from __future__ import annotations

import logging
from typing import Optional

from ..attendance.derivation import derive, is_working_day
from ..attendance.edits import apply_edit, cycle_status
from ..attendance.model import DailyAttendance, MonthView, Sheet
from ..attendance.repository import AttendanceRepository
from ..attendance.sheet import build_sheet, render_month
from ..attendance.time_source import TimeDrawer, random_time_drawer
from ..classes.service import ClassService
from ..common.datetime_utils import require_iso_date
from ..core.enums import EditField, ViewType
from ..core.exceptions import NotFoundError, ValidationError
from ..holidays.model import HolidayToggle
from ..holidays.service import HolidayService
from ..students.model import Student
from ..students.service import StudentService
from .state import ConsoleState, DashboardStats

logger = logging.getLogger(__name__)


class ConsoleSession:
    """Single-admin controller over ConsoleState.

    Transitions: load, select_view, select_class, generate_sheet,
    select_month, apply_edit / cycle, toggle_holiday, save, discard.
    Cell edits stay in memory until save(); holiday toggles are written
    straight through.
    """

    def __init__(
        self,
        *,
        classes: ClassService,
        students: StudentService,
        holidays: HolidayService,
        attendance: AttendanceRepository,
        draw_time: Optional[TimeDrawer] = None,
    ):
        self._classes = classes
        self._students = students
        self._holidays = holidays
        self._attendance = attendance
        self._draw_time = draw_time or random_time_drawer()
        self.state = ConsoleState()

    # --- lifecycle -------------------------------------------------------

    def load(self) -> ConsoleState:
        self.state.live_overrides = self._attendance.load_overrides()
        self.state.loaded = True
        self.state.dirty = False
        return self.state

    def _ensure_loaded(self) -> None:
        if not self.state.loaded:
            self.load()

    def stats(self) -> DashboardStats:
        return DashboardStats(
            classes=len(self._classes.list_all()),
            students=len(self._students.list_all()),
            holidays=len(self._holidays.list_all()),
        )

    # --- navigation ------------------------------------------------------

    def select_view(self, view: str | ViewType) -> ConsoleState:
        try:
            view = ViewType(view)
        except ValueError:
            raise ValidationError(f"Unknown view {view!r}")
        if view == ViewType.STUDENTS:
            if not self.state.selected_class_id:
                raise ValidationError("Please select a class first.")
        else:
            self.state.selected_class_id = None
        self.state.view = view
        return self.state

    def select_class(self, class_id: str) -> ConsoleState:
        self._classes.get(class_id)
        self.state.selected_class_id = class_id
        self.state.view = ViewType.STUDENTS
        return self.state

    # --- attendance sheet ------------------------------------------------

    def generate_sheet(self, *, class_id: str, start_month: str, end_month: str) -> Sheet:
        self._ensure_loaded()
        sheet = build_sheet(
            class_id=class_id,
            start_month=start_month,
            end_month=end_month,
            students=self._students.list_all(),
        )
        self._classes.get(sheet.class_id)
        self.state.sheet = sheet
        self.state.month_index = 0
        self.state.view = ViewType.ATTENDANCE
        return sheet

    def _roster(self, sheet: Sheet) -> list[Student]:
        """Current students of the sheet's class; deletions since generation drop out."""
        return self._students.list_for_class(sheet.class_id)

    def _require_sheet(self) -> Sheet:
        if self.state.sheet is None:
            raise ValidationError("Generate an attendance sheet first.")
        return self.state.sheet

    def select_month(self, index: int) -> ConsoleState:
        sheet = self._require_sheet()
        if not 0 <= index < len(sheet.months):
            raise ValidationError("Month is outside the generated range")
        self.state.month_index = index
        return self.state

    def month_view(self, index: Optional[int] = None) -> MonthView:
        sheet = self._require_sheet()
        if index is not None:
            self.select_month(index)
        if not sheet.months:
            raise ValidationError("The selected range contains no months")

        holidays = self._holidays.list_all()
        holiday_dates = frozenset(h.date for h in holidays)
        return render_month(
            sheet.months[self.state.month_index],
            self._roster(sheet),
            lambda student_pk, date_str: derive(
                self.state.live_overrides, student_pk, date_str, holiday_dates, self._draw_time
            ),
            holidays,
        )

    def cell(self, student_pk: str, date_str: str) -> DailyAttendance:
        self._ensure_loaded()
        date_str = require_iso_date(date_str)
        return derive(self.state.live_overrides, student_pk, date_str, self._holidays.holiday_dates(), self._draw_time)

    def _check_editable(self, student_pk: str, date_str: str, holiday_dates: frozenset[str]) -> None:
        sheet = self._require_sheet()
        if not any(s.student_pk == student_pk for s in self._roster(sheet)):
            raise NotFoundError("Student is not on this sheet")
        try:
            working = is_working_day(date_str, holiday_dates)
        except ValueError:
            raise ValidationError("Date must be in YYYY-MM-DD format")
        if not any(date_str.startswith(m.prefix + "-") for m in sheet.months):
            raise ValidationError("Date is outside the generated sheet")
        if not working:
            raise ValidationError("Sundays and holidays cannot be marked")

    def apply_edit(self, *, student_pk: str, date_str: str, field: str | EditField, value) -> DailyAttendance:
        self._ensure_loaded()
        date_str = require_iso_date(date_str)
        holiday_dates = self._holidays.holiday_dates()
        self._check_editable(student_pk, date_str, holiday_dates)

        self.state.live_overrides = apply_edit(
            self.state.live_overrides,
            student_pk,
            date_str,
            field,
            value,
            holiday_dates=holiday_dates,
            draw_time=self._draw_time,
        )
        self.state.dirty = True
        return self.state.live_overrides[student_pk][date_str]

    def cycle(self, *, student_pk: str, date_str: str) -> DailyAttendance:
        self._ensure_loaded()
        date_str = require_iso_date(date_str)
        holiday_dates = self._holidays.holiday_dates()
        self._check_editable(student_pk, date_str, holiday_dates)

        current = derive(self.state.live_overrides, student_pk, date_str, holiday_dates, self._draw_time)
        return self.apply_edit(
            student_pk=student_pk,
            date_str=date_str,
            field=EditField.STATUS,
            value=cycle_status(current.status),
        )

    def toggle_holiday(self, *, date: str, name: Optional[str] = None, confirm_removal: bool = False) -> HolidayToggle:
        return self._holidays.toggle(date=date, name=name, confirm_removal=confirm_removal)

    def save(self) -> int:
        """Persist the whole working copy. Returns the number of stored cells."""
        self._ensure_loaded()
        self._attendance.save_overrides(self.state.live_overrides)
        self.state.dirty = False
        count = sum(len(days) for days in self.state.live_overrides.values())
        logger.info("attendance saved (%d overridden cells)", count)
        return count

    def discard(self) -> ConsoleState:
        return self.load()
