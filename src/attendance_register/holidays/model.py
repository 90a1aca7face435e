from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Holiday:
    holiday_id: str
    date: str  # YYYY-MM-DD
    name: str


class ToggleAction(str, Enum):
    ADDED = "added"
    REMOVED = "removed"
    CONFIRM = "confirm"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class HolidayToggle:
    """Outcome of clicking a date header on the attendance sheet.

    CONFIRM means a holiday exists on the date and removal still needs the
    user's confirmation; nothing was changed.
    """

    action: ToggleAction
    date: str
    holiday: Optional[Holiday] = None
