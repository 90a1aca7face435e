from __future__ import annotations

from typing import AbstractSet, Callable

from ..common.datetime_utils import from_minutes, is_hhmm, to_minutes
from ..core.constants import LOW_ATTENDANCE_THRESHOLD
from ..core.enums import AttendanceStatus
from .derivation import is_working_day
from .model import DailyAttendance, MonthDescriptor, MonthlySummary

# date_str -> cell for the student being summarised
CellLookup = Callable[[str], DailyAttendance]


def monthly_summary(month: MonthDescriptor, cell_for: CellLookup, holiday_dates: AbstractSet[str]) -> MonthlySummary:
    """Fold one student's month into counters and a percentage.

    Sundays and holidays are not working days. A working day counts even
    when its status is none of P/A/L.
    """

    present = absent = leave = working_days = 0
    for day in month.days:
        date_str = month.date_str(day)
        if not is_working_day(date_str, holiday_dates):
            continue
        working_days += 1
        status = cell_for(date_str).status
        if status == AttendanceStatus.PRESENT:
            present += 1
        elif status == AttendanceStatus.ABSENT:
            absent += 1
        elif status == AttendanceStatus.LEAVE:
            leave += 1

    ratio = present / working_days * 100 if working_days > 0 else 0.0
    percentage = f"{ratio:.2f}"
    return MonthlySummary(
        present=present,
        absent=absent,
        leave=leave,
        working_days=working_days,
        percentage=percentage,
        is_low=float(percentage) < LOW_ATTENDANCE_THRESHOLD,
    )


def duration(in_time: str, out_time: str) -> str:
    """Worked time between two same-day HH:MM values, or '-' when undefined."""
    if not in_time or not out_time or not is_hhmm(in_time) or not is_hhmm(out_time):
        return "-"
    minutes = to_minutes(out_time) - to_minutes(in_time)
    if minutes <= 0:
        return "-"
    return from_minutes(minutes)
