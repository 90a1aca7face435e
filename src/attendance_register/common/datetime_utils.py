from __future__ import annotations

import re
from datetime import date, datetime

from ..core.exceptions import ValidationError

_HHMM = re.compile(r"^([01][0-9]|2[0-3]):[0-5][0-9]$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def require_iso_date(value: str, field_name: str = "Date") -> str:
    try:
        return parse_iso_date((value or "").strip()).strftime("%Y-%m-%d")
    except ValueError:
        raise ValidationError(f"{field_name} must be in YYYY-MM-DD format")


def parse_month(value: str) -> tuple[int, int]:
    """Parse YYYY-MM into (year, month 1..12)."""
    try:
        parsed = datetime.strptime(value.strip(), "%Y-%m")
    except ValueError:
        raise ValidationError(f"Invalid month {value!r}, expected YYYY-MM")
    return parsed.year, parsed.month


def date_key(year: int, month: int, day: int) -> str:
    """Build the YYYY-MM-DD key used by holidays and overrides (month is 1-based)."""
    return f"{year:04d}-{month:02d}-{day:02d}"


def is_sunday(value: str | date) -> bool:
    if isinstance(value, str):
        value = parse_iso_date(value)
    return value.weekday() == 6


def is_hhmm(value: str) -> bool:
    return bool(_HHMM.match(value or ""))


def to_minutes(value: str) -> int:
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def from_minutes(total: int) -> str:
    return f"{total // 60:02d}:{total % 60:02d}"


def current_month() -> str:
    """Current month as YYYY-MM.

    Note: Wrapped so tests can patch it.
    """
    return date.today().strftime("%Y-%m")
