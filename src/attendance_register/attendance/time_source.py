from __future__ import annotations

import random
from typing import Callable, Optional

from ..common.datetime_utils import from_minutes, to_minutes

# (range_start, range_end) -> HH:MM within the closed range
TimeDrawer = Callable[[str, str], str]


def random_time_in_range(start: str, end: str, rng: Optional[random.Random] = None) -> str:
    """Uniformly pick a whole-minute HH:MM between start and end (inclusive)."""
    rng = rng or random
    return from_minutes(rng.randint(to_minutes(start), to_minutes(end)))


def random_time_drawer(rng: Optional[random.Random] = None) -> TimeDrawer:
    rng = rng or random.Random()

    def draw(start: str, end: str) -> str:
        return random_time_in_range(start, end, rng)

    return draw


def fixed_time_drawer() -> TimeDrawer:
    """Always return the start of the range (deterministic placeholder time)."""

    def draw(start: str, end: str) -> str:
        return start

    return draw
