from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import EventType
from .strategies.base import TimelinessStrategy
from .strategies.check_in_strategy import CheckInStrategy
from .strategies.check_out_strategy import CheckOutStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose the timeliness strategy for an event type."""

    def for_event(self, event_type: EventType) -> TimelinessStrategy:
        if event_type == EventType.CHECK_IN:
            return CheckInStrategy()
        if event_type == EventType.CHECK_OUT:
            return CheckOutStrategy()
        raise ValueError(f"Unsupported event type: {event_type!r}")
