from __future__ import annotations

from .base import WorkedTimeCalculator
from ...attendance.model import AttendanceRecord


class StandardWorkedTimeCalculator(WorkedTimeCalculator):
    """Standard rule: exact time between time_in and time_out, not below 0."""

    def worked_seconds(self, record: AttendanceRecord) -> float:
        if not record.time_in or not record.time_out:
            return 0.0
        return max((record.time_out - record.time_in).total_seconds(), 0.0)
