from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Daily attendance status as stored in the override log."""

    PRESENT = "P"
    ABSENT = "A"
    LEAVE = "L"
    HOLIDAY = "H"
    UNSET = ""


class StoreKey(str, Enum):
    """Logical collection names in the record store."""

    INSTITUTE = "institute"
    CLASSES = "classes"
    STUDENTS = "students"
    HOLIDAYS = "holidays"
    ATTENDANCE = "attendance"


class ViewType(str, Enum):
    DASHBOARD = "dashboard"
    INSTITUTE = "institute"
    CLASSES = "classes"
    STUDENTS = "students"
    HOLIDAYS = "holidays"
    ATTENDANCE = "attendance"


class EditField(str, Enum):
    """Editable fields of a daily attendance cell."""

    STATUS = "status"
    IN_TIME = "in_time"
    OUT_TIME = "out_time"
