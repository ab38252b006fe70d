from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceFilter, AttendanceListRow, AttendanceRecord


class AttendanceRepository(Protocol):
    """Storage port for attendance records.

    Implementations enforce one row per (employee_id, work_date) and raise
    RecordConflict when an insert would break it. The ``set_time_*`` writes
    are guarded and return False when the guard did not match.
    """

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        work_date: date,
        time_in: Optional[datetime],
        time_out: Optional[datetime],
        status: Optional[AttendanceStatus],
    ) -> int:
        raise NotImplementedError

    def set_time_in(self, *, attendance_id: int, time_in: datetime, status: AttendanceStatus) -> bool:
        """Only applies while time_in is still unset."""

        raise NotImplementedError

    def set_time_out(self, *, attendance_id: int, time_out: datetime, status: AttendanceStatus) -> bool:
        """Only applies while time_in is set and time_out is unset."""

        raise NotImplementedError

    def update(
        self,
        *,
        attendance_id: int,
        time_in: Optional[datetime],
        time_out: Optional[datetime],
        status: Optional[AttendanceStatus],
    ) -> bool:
        """Operator override, no guards beyond the row existing."""

        raise NotImplementedError

    def delete(self, attendance_id: int) -> bool:
        raise NotImplementedError

    def delete_many(self, attendance_ids: Sequence[int]) -> int:
        raise NotImplementedError

    def list_records(self, flt: AttendanceFilter) -> Sequence[AttendanceListRow]:
        raise NotImplementedError

    def get_recent_for_employee(self, employee_id: int, limit: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_employee_since(self, employee_id: int, since: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
