from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceStatus, EventType
from ..shifts.resolver import resolve_shift
from .factory import AttendanceStrategyFactory

_factory = AttendanceStrategyFactory()


def classify(
    event_time: datetime,
    event_type: EventType,
    shift_start_hour: int,
    shift_end_hour: int,
) -> AttendanceStatus:
    """Classify one event against a shift window.

    Pure: the result depends only on the arguments. The reference instant is
    the shift start (check-in) or end (check-out) on ``event_time``'s own
    calendar day, at minute/second zero; an exact match is EXACT_TIME.
    """

    strategy = _factory.for_event(event_type)
    return strategy.classify(event_time, shift_start_hour=shift_start_hour, shift_end_hour=shift_end_hour)


def classify_event(
    event_time: datetime,
    event_type: EventType,
    check_in_time: Optional[datetime] = None,
) -> AttendanceStatus:
    shift = resolve_shift(event_time, event_type, check_in_time)
    return classify(event_time, event_type, shift.start_hour, shift.end_hour)
