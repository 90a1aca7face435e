from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..attendance.model import Overrides, Sheet
from ..core.enums import ViewType


@dataclass
class ConsoleState:
    """Everything the admin console holds between requests.

    Only ConsoleSession mutates it. `live_overrides` is the working copy of
    the attendance log: edits land here and reach the store on save().
    """

    view: ViewType = ViewType.DASHBOARD
    selected_class_id: Optional[str] = None
    sheet: Optional[Sheet] = None
    month_index: int = 0
    live_overrides: Overrides = field(default_factory=dict)
    loaded: bool = False
    dirty: bool = False


@dataclass(frozen=True)
class DashboardStats:
    classes: int
    students: int
    holidays: int
