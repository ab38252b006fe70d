from __future__ import annotations

from ...core.enums import AttendanceStatus
from .base import TimelinessStrategy


class CheckInStrategy(TimelinessStrategy):
    """Arriving after the shift start is late, before it is early."""

    def reference_hour(self, *, shift_start_hour: int, shift_end_hour: int) -> int:
        return shift_start_hour

    def when_after(self) -> AttendanceStatus:
        return AttendanceStatus.UNDERTIME

    def when_before(self) -> AttendanceStatus:
        return AttendanceStatus.OVERTIME
