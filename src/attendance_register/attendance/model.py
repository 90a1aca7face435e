from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from ..common.datetime_utils import date_key
from ..core.enums import AttendanceStatus
from ..holidays.model import Holiday
from ..students.model import Student


@dataclass(frozen=True)
class DailyAttendance:
    """One (student, date) cell: status plus HH:MM in/out times ('' when unset)."""

    status: AttendanceStatus = AttendanceStatus.UNSET
    in_time: str = ""
    out_time: str = ""

    def to_dict(self) -> dict:
        return {"status": self.status.value, "in_time": self.in_time, "out_time": self.out_time}

    @classmethod
    def from_dict(cls, raw: Mapping) -> "DailyAttendance":
        return cls(
            status=AttendanceStatus(raw.get("status", "")),
            in_time=raw.get("in_time", "") or "",
            out_time=raw.get("out_time", "") or "",
        )


EMPTY_CELL = DailyAttendance()

# student_pk -> date (YYYY-MM-DD) -> explicitly set cell
Overrides = Dict[str, Dict[str, DailyAttendance]]


@dataclass(frozen=True)
class MonthDescriptor:
    year: int
    month_index: int  # zero-based
    month_name: str
    days: tuple[int, ...]

    @property
    def month(self) -> int:
        return self.month_index + 1

    @property
    def prefix(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def label(self) -> str:
        return f"{self.month_name} {self.year}"

    def date_str(self, day: int) -> str:
        return date_key(self.year, self.month, day)


@dataclass(frozen=True)
class Sheet:
    """Students of one class over a contiguous range of months."""

    class_id: str
    start_month: str
    end_month: str
    students: tuple[Student, ...]
    months: tuple[MonthDescriptor, ...]


@dataclass(frozen=True)
class MonthlySummary:
    present: int = 0
    absent: int = 0
    leave: int = 0
    working_days: int = 0
    percentage: str = "0.00"
    is_low: bool = False


@dataclass(frozen=True)
class DayHeader:
    day: int
    date: str
    weekday_initial: str
    is_sunday: bool
    is_holiday: bool
    holiday_name: Optional[str] = None


@dataclass(frozen=True)
class SheetCell:
    date: str
    cell: DailyAttendance
    glyph: str
    duration: str
    editable: bool


@dataclass(frozen=True)
class StudentMonthRow:
    student: Student
    cells: tuple[SheetCell, ...]
    summary: MonthlySummary


@dataclass(frozen=True)
class MonthView:
    month: MonthDescriptor
    headers: tuple[DayHeader, ...]
    rows: tuple[StudentMonthRow, ...]
    holidays: tuple[Holiday, ...] = field(default_factory=tuple)
