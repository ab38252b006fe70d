from __future__ import annotations

from ...core.enums import AttendanceStatus
from .base import TimelinessStrategy


class CheckOutStrategy(TimelinessStrategy):
    """Leaving after the shift end is overtime, before it is undertime."""

    def reference_hour(self, *, shift_start_hour: int, shift_end_hour: int) -> int:
        return shift_end_hour

    def when_after(self) -> AttendanceStatus:
        return AttendanceStatus.OVERTIME

    def when_before(self) -> AttendanceStatus:
        return AttendanceStatus.UNDERTIME
