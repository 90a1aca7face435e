from __future__ import annotations

from dataclasses import replace
from typing import AbstractSet, Mapping

from ..common.datetime_utils import is_hhmm
from ..core.enums import AttendanceStatus, EditField
from ..core.exceptions import ValidationError
from .derivation import derive, present_cell
from .model import DailyAttendance, Overrides
from .time_source import TimeDrawer

STATUS_CYCLE = (AttendanceStatus.PRESENT, AttendanceStatus.ABSENT, AttendanceStatus.LEAVE)


def cycle_status(current: AttendanceStatus) -> AttendanceStatus:
    """P -> A -> L -> P. Anything outside the cycle restarts at P."""
    if current not in STATUS_CYCLE:
        return AttendanceStatus.PRESENT
    return STATUS_CYCLE[(STATUS_CYCLE.index(current) + 1) % len(STATUS_CYCLE)]


def _coerce_field(field: str | EditField) -> EditField:
    try:
        return EditField(field)
    except ValueError:
        raise ValidationError(f"Unknown attendance field {field!r}")


def _coerce_status(value) -> AttendanceStatus:
    try:
        return AttendanceStatus(value)
    except ValueError:
        raise ValidationError(f"Unknown attendance status {value!r}")


def edit_cell(cell: DailyAttendance, field: EditField, value, draw_time: TimeDrawer) -> DailyAttendance:
    if field == EditField.STATUS:
        status = _coerce_status(value)
        if status == AttendanceStatus.PRESENT:
            return present_cell(draw_time)
        return DailyAttendance(status=status)

    value = (value or "").strip()
    if value and not is_hhmm(value):
        raise ValidationError("Enter time in 24-hour HH:MM format")
    if cell.status != AttendanceStatus.PRESENT:
        raise ValidationError("Times can only be set for a present student")
    if field == EditField.IN_TIME:
        return replace(cell, in_time=value)
    return replace(cell, out_time=value)


def apply_edit(
    overrides: Mapping[str, Mapping[str, DailyAttendance]],
    student_pk: str,
    date_str: str,
    field: str | EditField,
    value,
    *,
    holiday_dates: AbstractSet[str],
    draw_time: TimeDrawer,
) -> Overrides:
    """Return a new override mapping with one cell edited.

    The edited cell starts from the derived cell (which already prefers an
    existing override) and gets `field` set to `value`. Setting the status
    to Present draws fresh times; any other status clears them. The input
    mapping is left untouched.
    """

    field = _coerce_field(field)
    base = derive(overrides, student_pk, date_str, holiday_dates, draw_time)

    updated: Overrides = {pk: dict(days) for pk, days in overrides.items()}
    updated.setdefault(student_pk, {})[date_str] = edit_cell(base, field, value, draw_time)
    return updated
