"""Two-layer read of attendance cells.

`default_cell` generates what a day looks like when nobody touched it;
`derive` consults the sparse override log first and falls back to it.
"""

from __future__ import annotations

from typing import AbstractSet, Mapping, Optional

from ..common.datetime_utils import is_sunday
from ..core.constants import DEFAULT_IN_TIME_RANGE, DEFAULT_OUT_TIME_RANGE
from ..core.enums import AttendanceStatus
from .model import EMPTY_CELL, DailyAttendance
from .time_source import TimeDrawer


def is_working_day(date_str: str, holiday_dates: AbstractSet[str]) -> bool:
    return not is_sunday(date_str) and date_str not in holiday_dates


def present_cell(draw_time: TimeDrawer) -> DailyAttendance:
    return DailyAttendance(
        status=AttendanceStatus.PRESENT,
        in_time=draw_time(*DEFAULT_IN_TIME_RANGE),
        out_time=draw_time(*DEFAULT_OUT_TIME_RANGE),
    )


def default_cell(date_str: str, holiday_dates: AbstractSet[str], draw_time: TimeDrawer) -> DailyAttendance:
    """Cell for a day with no override.

    Sundays and holidays are blank; the sheet overlays their S/H glyph.
    Every other day is assumed present with placeholder times.
    """

    if not is_working_day(date_str, holiday_dates):
        return EMPTY_CELL
    return present_cell(draw_time)


def lookup_override(
    overrides: Mapping[str, Mapping[str, DailyAttendance]], student_pk: str, date_str: str
) -> Optional[DailyAttendance]:
    return overrides.get(student_pk, {}).get(date_str)


def derive(
    overrides: Mapping[str, Mapping[str, DailyAttendance]],
    student_pk: str,
    date_str: str,
    holiday_dates: AbstractSet[str],
    draw_time: TimeDrawer,
) -> DailyAttendance:
    stored = lookup_override(overrides, student_pk, date_str)
    if stored is not None:
        return stored
    return default_cell(date_str, holiday_dates, draw_time)
