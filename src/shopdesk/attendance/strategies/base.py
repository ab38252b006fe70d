from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from ...common.datetime_utils import at_hour
from ...core.enums import AttendanceStatus


class TimelinessStrategy(ABC):
    """Strategy Pattern: how one kind of event is compared to its shift."""

    @abstractmethod
    def reference_hour(self, *, shift_start_hour: int, shift_end_hour: int) -> int:
        raise NotImplementedError

    @abstractmethod
    def when_after(self) -> AttendanceStatus:
        """Status for an event strictly after the reference instant."""
        raise NotImplementedError

    @abstractmethod
    def when_before(self) -> AttendanceStatus:
        raise NotImplementedError

    def classify(self, event_time: datetime, *, shift_start_hour: int, shift_end_hour: int) -> AttendanceStatus:
        reference = at_hour(
            event_time,
            self.reference_hour(shift_start_hour=shift_start_hour, shift_end_hour=shift_end_hour),
        )
        if event_time == reference:
            return AttendanceStatus.EXACT_TIME
        if event_time > reference:
            return self.when_after()
        return self.when_before()
