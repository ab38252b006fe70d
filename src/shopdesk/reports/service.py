from __future__ import annotations

from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord, AttendanceStats
from .calculator.base import WorkedTimeCalculator
from .calculator.standard_calculator import StandardWorkedTimeCalculator


class AttendanceReportService:
    def __init__(self, *, calculator: Optional[WorkedTimeCalculator] = None):
        self._calculator = calculator or StandardWorkedTimeCalculator()

    def worked_seconds(self, record: AttendanceRecord) -> float:
        return self._calculator.worked_seconds(record)

    def build_stats(self, records: Iterable[AttendanceRecord]) -> AttendanceStats:
        total_days = 0
        complete_days = 0
        total_seconds = 0.0

        for r in records:
            total_days += 1
            if r.time_in and r.time_out:
                complete_days += 1
                total_seconds += self.worked_seconds(r)

        total_hours = total_seconds / 3600
        average_hours = total_hours / complete_days if complete_days else 0.0

        return AttendanceStats(
            total_days=total_days,
            complete_days=complete_days,
            incomplete_days=total_days - complete_days,
            total_hours=round(total_hours, 2),
            average_hours=round(average_hours, 2),
        )
