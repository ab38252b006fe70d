from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import (
    DAY_SHIFT_END_HOUR,
    DAY_SHIFT_START_HOUR,
    EVENING_SHIFT_END_HOUR,
    EVENING_SHIFT_START_HOUR,
)


@dataclass(frozen=True)
class Shift:
    """Fixed shift window in local hours: [start_hour:00, end_hour:00]."""

    name: str
    start_hour: int
    end_hour: int


DAY_SHIFT = Shift(name="Day", start_hour=DAY_SHIFT_START_HOUR, end_hour=DAY_SHIFT_END_HOUR)
EVENING_SHIFT = Shift(name="Evening", start_hour=EVENING_SHIFT_START_HOUR, end_hour=EVENING_SHIFT_END_HOUR)
