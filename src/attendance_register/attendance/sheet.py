from __future__ import annotations

import calendar
from datetime import date
from typing import AbstractSet, Callable, Sequence

from ..common.datetime_utils import is_sunday, parse_month
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..holidays.model import Holiday
from ..students.model import Student
from ..students.service import roster_order
from .model import DailyAttendance, DayHeader, MonthDescriptor, MonthView, Sheet, SheetCell, StudentMonthRow
from .summary import duration, monthly_summary

SUNDAY_GLYPH = "S"
HOLIDAY_GLYPH = AttendanceStatus.HOLIDAY.value

# (student_pk, date_str) -> derived cell
CellResolver = Callable[[str, str], DailyAttendance]


def month_descriptor(year: int, month: int) -> MonthDescriptor:
    days_in_month = calendar.monthrange(year, month)[1]
    return MonthDescriptor(
        year=year,
        month_index=month - 1,
        month_name=calendar.month_name[month],
        days=tuple(range(1, days_in_month + 1)),
    )


def build_months(start_month: str, end_month: str) -> list[MonthDescriptor]:
    """Month descriptors from start to end inclusive; empty when start > end."""
    year, month = parse_month(start_month)
    last = parse_month(end_month)

    months: list[MonthDescriptor] = []
    while (year, month) <= last:
        months.append(month_descriptor(year, month))
        year, month = (year + 1, 1) if month == 12 else (year, month + 1)
    return months


def build_sheet(*, class_id: str, start_month: str, end_month: str, students: Sequence[Student]) -> Sheet:
    if not (class_id or "").strip() or not (start_month or "").strip() or not (end_month or "").strip():
        raise ValidationError("Please select a class and month range.")

    months = build_months(start_month, end_month)
    roster = roster_order([s for s in students if s.class_id == class_id])
    return Sheet(
        class_id=class_id,
        start_month=start_month.strip(),
        end_month=end_month.strip(),
        students=tuple(roster),
        months=tuple(months),
    )


def day_headers(month: MonthDescriptor, holidays: Sequence[Holiday]) -> tuple[DayHeader, ...]:
    names = {h.date: h.name for h in holidays}
    headers = []
    for day in month.days:
        date_str = month.date_str(day)
        headers.append(
            DayHeader(
                day=day,
                date=date_str,
                weekday_initial=date(month.year, month.month, day).strftime("%a")[0],
                is_sunday=is_sunday(date_str),
                is_holiday=date_str in names,
                holiday_name=names.get(date_str),
            )
        )
    return tuple(headers)


def render_cell(date_str: str, cell: DailyAttendance, holiday_dates: AbstractSet[str]) -> SheetCell:
    """Overlay the Holiday/Sunday glyph; those days show no times."""
    if date_str in holiday_dates:
        return SheetCell(date=date_str, cell=cell, glyph=HOLIDAY_GLYPH, duration="-", editable=False)
    if is_sunday(date_str):
        return SheetCell(date=date_str, cell=cell, glyph=SUNDAY_GLYPH, duration="-", editable=False)
    return SheetCell(
        date=date_str,
        cell=cell,
        glyph=cell.status.value,
        duration=duration(cell.in_time, cell.out_time),
        editable=True,
    )


def render_month(
    month: MonthDescriptor,
    students: Sequence[Student],
    resolve: CellResolver,
    holidays: Sequence[Holiday],
) -> MonthView:
    holiday_dates = frozenset(h.date for h in holidays)
    month_holidays = tuple(sorted((h for h in holidays if h.date.startswith(month.prefix + "-")), key=lambda h: h.date))

    rows = []
    for student in students:
        cells = {month.date_str(d): resolve(student.student_pk, month.date_str(d)) for d in month.days}
        rows.append(
            StudentMonthRow(
                student=student,
                cells=tuple(render_cell(ds, cell, holiday_dates) for ds, cell in cells.items()),
                summary=monthly_summary(month, cells.__getitem__, holiday_dates),
            )
        )

    return MonthView(
        month=month,
        headers=day_headers(month, holidays),
        rows=tuple(rows),
        holidays=month_holidays,
    )
