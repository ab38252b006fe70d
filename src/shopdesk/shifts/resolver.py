from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..core.constants import EVENING_CUTOFF_HOUR
from ..core.enums import EventType
from .model import DAY_SHIFT, EVENING_SHIFT, Shift


def _shift_for_hour(hour: int) -> Shift:
    return EVENING_SHIFT if hour >= EVENING_CUTOFF_HOUR else DAY_SHIFT


def resolve_shift(
    event_time: datetime,
    event_type: EventType,
    check_in_time: Optional[datetime] = None,
) -> Shift:
    """Pick the shift an event is measured against.

    Check-outs follow the paired check-in when there is one, so a day worker
    leaving at 19:00 is still compared to 18:00. Without a check-in the
    check-out's own hour decides, using the same noon cutoff.
    """

    if event_type == EventType.CHECK_OUT and check_in_time is not None:
        return _shift_for_hour(check_in_time.hour)
    return _shift_for_hour(event_time.hour)
