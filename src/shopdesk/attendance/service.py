from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import require_positive_int, require_time_order, require_work_day
from ..core.constants import CONFLICT_RETRY_ATTEMPTS, DEFAULT_HISTORY_LIMIT, DEFAULT_STATS_DAYS
from ..core.enums import AttendanceStatus, EventType
from ..core.exceptions import (
    DuplicateCheckIn,
    DuplicateCheckOut,
    EmployeeInactive,
    EmployeeNotFound,
    MissingCheckIn,
    RecordConflict,
    RecordNotFound,
    StorageError,
    ValidationError,
)
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..qr.service import parse_payload
from ..reports.service import AttendanceReportService
from .classifier import classify_event
from .model import AttendanceFilter, AttendanceListRow, AttendanceRecord, AttendanceStats
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanResult:
    event_type: EventType
    record: AttendanceRecord


class AttendanceService:
    """Use cases around the daily attendance record.

    Check-in and check-out are classified writes; the ``*_record`` methods
    are the operator override path and take the status as given.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        reports: AttendanceReportService | None = None,
        require_active_employee: bool = True,
        conflict_retries: int = CONFLICT_RETRY_ATTEMPTS,
        clock: Callable[[], datetime] = now_local,
    ):
        self._attendance = attendance
        self._employees = employees
        self._reports = reports or AttendanceReportService()
        self._require_active = bool(require_active_employee)
        self._conflict_retries = max(int(conflict_retries), 1)
        self._clock = clock

    def _require_employee(self, employee_id: int, *, check_active: bool = True) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise EmployeeNotFound(f"Employee {employee_id} not found")
        if check_active and self._require_active and not employee.is_active:
            raise EmployeeInactive(f"Employee {employee_id} is inactive")
        return employee

    def _reload(self, attendance_id: int) -> AttendanceRecord:
        record = self._attendance.get_by_id(attendance_id)
        if not record:
            raise RecordNotFound(f"Attendance record {attendance_id} not found")
        return record

    def check_in(self, employee_id: int, *, now: datetime | None = None) -> AttendanceRecord:
        now = now or self._clock()
        today = now.date()
        employee_id = require_positive_int(employee_id, "employee_id")
        self._require_employee(employee_id)

        status = classify_event(now, EventType.CHECK_IN)

        for _ in range(self._conflict_retries):
            existing = self._attendance.get_for_employee_and_date(employee_id, today)

            if existing is None:
                try:
                    attendance_id = self._attendance.create(
                        employee_id=employee_id,
                        work_date=today,
                        time_in=now,
                        time_out=None,
                        status=status,
                    )
                except RecordConflict:
                    logger.info("check-in for employee %s lost an insert race, re-reading", employee_id)
                    continue
                logger.info("employee %s checked in at %s (%s)", employee_id, now.isoformat(), status.value)
                return self._reload(attendance_id)

            if existing.time_in is not None:
                logger.warning("employee %s already checked in on %s", employee_id, today)
                raise DuplicateCheckIn("Employee already checked in today")

            # Operator-created placeholder for today: fill in time_in.
            if self._attendance.set_time_in(attendance_id=existing.attendance_id, time_in=now, status=status):
                logger.info("employee %s checked in at %s (%s)", employee_id, now.isoformat(), status.value)
                return self._reload(existing.attendance_id)

        raise StorageError(f"Check-in for employee {employee_id} kept conflicting, try again")

    def check_out(self, employee_id: int, *, now: datetime | None = None) -> AttendanceRecord:
        now = now or self._clock()
        today = now.date()
        employee_id = require_positive_int(employee_id, "employee_id")
        self._require_employee(employee_id)

        for _ in range(self._conflict_retries):
            record = self._attendance.get_for_employee_and_date(employee_id, today)
            if record is None or record.time_in is None:
                logger.warning("employee %s tried to check out without checking in on %s", employee_id, today)
                raise MissingCheckIn("Employee hasn't checked in today")
            if record.time_out is not None:
                logger.warning("employee %s already checked out on %s", employee_id, today)
                raise DuplicateCheckOut("Employee already checked out today")
            if now < record.time_in:
                raise ValidationError("Check-out time cannot be earlier than check-in time")

            status = classify_event(now, EventType.CHECK_OUT, record.time_in)
            if self._attendance.set_time_out(attendance_id=record.attendance_id, time_out=now, status=status):
                logger.info("employee %s checked out at %s (%s)", employee_id, now.isoformat(), status.value)
                return self._reload(record.attendance_id)

        raise StorageError(f"Check-out for employee {employee_id} kept conflicting, try again")

    def record(self, employee_id: int, event_type: EventType, *, now: datetime | None = None) -> AttendanceRecord:
        if event_type == EventType.CHECK_IN:
            return self.check_in(employee_id, now=now)
        return self.check_out(employee_id, now=now)

    def scan(self, qr_data: str, *, now: datetime | None = None) -> ScanResult:
        """Scanner entry point: an open record is checked out, anything else checked in."""
        now = now or self._clock()
        employee_id = parse_payload(qr_data)

        current = self._attendance.get_for_employee_and_date(employee_id, now.date())
        event_type = EventType.CHECK_OUT if current and current.is_open else EventType.CHECK_IN
        return ScanResult(event_type=event_type, record=self.record(employee_id, event_type, now=now))

    def get_today_record(self, employee_id: int, today: date | None = None) -> Optional[AttendanceRecord]:
        today = today or self._clock().date()
        return self._attendance.get_for_employee_and_date(require_positive_int(employee_id, "employee_id"), today)

    def list_records(
        self,
        *,
        employee_id: int | None = None,
        work_date: date | None = None,
        search: str | None = None,
    ) -> Sequence[AttendanceListRow]:
        flt = AttendanceFilter(
            employee_id=require_positive_int(employee_id, "employee_id") if employee_id is not None else None,
            work_date=work_date,
            search=(search or "").strip() or None,
        )
        return self._attendance.list_records(flt)

    def get_history(self, employee_id: int, *, limit: int = DEFAULT_HISTORY_LIMIT) -> Sequence[AttendanceRecord]:
        limit = require_positive_int(limit, "limit")
        return self._attendance.get_recent_for_employee(require_positive_int(employee_id, "employee_id"), limit)

    def get_stats(self, employee_id: int, *, now: datetime | None = None, days: int = DEFAULT_STATS_DAYS) -> AttendanceStats:
        now = now or self._clock()
        since = now.date() - timedelta(days=require_positive_int(days, "days") - 1)
        records = self._attendance.list_for_employee_since(require_positive_int(employee_id, "employee_id"), since)
        return self._reports.build_stats(records)

    # Operator override

    def create_record(
        self,
        *,
        employee_id: int,
        time_in: datetime | None = None,
        time_out: datetime | None = None,
        status: AttendanceStatus | None = None,
        work_date: date | None = None,
    ) -> AttendanceRecord:
        employee_id = require_positive_int(employee_id, "employee_id")
        self._require_employee(employee_id, check_active=False)

        work_date = work_date or (time_in.date() if time_in else self._clock().date())
        require_work_day(work_date, time_in, time_out)
        require_time_order(time_in, time_out)
        if self._attendance.get_for_employee_and_date(employee_id, work_date):
            raise ValidationError(f"Employee {employee_id} already has an attendance record for {work_date}")

        try:
            attendance_id = self._attendance.create(
                employee_id=employee_id,
                work_date=work_date,
                time_in=time_in,
                time_out=time_out,
                status=status,
            )
        except RecordConflict as e:
            raise ValidationError(f"Employee {employee_id} already has an attendance record for {work_date}") from e

        logger.info("operator created attendance record %s for employee %s on %s", attendance_id, employee_id, work_date)
        return self._reload(attendance_id)

    def update_record(
        self,
        attendance_id: int,
        *,
        time_in: datetime | None = None,
        time_out: datetime | None = None,
        status: AttendanceStatus | None = None,
    ) -> AttendanceRecord:
        """Fields left as None keep their stored value."""
        attendance_id = require_positive_int(attendance_id, "attendance_id")
        current = self._reload(attendance_id)

        new_time_in = time_in if time_in is not None else current.time_in
        new_time_out = time_out if time_out is not None else current.time_out
        new_status = status if status is not None else current.status
        require_work_day(current.work_date, new_time_in, new_time_out)
        require_time_order(new_time_in, new_time_out)

        if not self._attendance.update(
            attendance_id=attendance_id,
            time_in=new_time_in,
            time_out=new_time_out,
            status=new_status,
        ):
            raise RecordNotFound(f"Attendance record {attendance_id} not found")

        logger.info("operator updated attendance record %s", attendance_id)
        return self._reload(attendance_id)

    def delete_record(self, attendance_id: int) -> None:
        attendance_id = require_positive_int(attendance_id, "attendance_id")
        if not self._attendance.delete(attendance_id):
            raise RecordNotFound(f"Attendance record {attendance_id} not found")
        logger.info("operator deleted attendance record %s", attendance_id)

    def delete_records(self, attendance_ids: Sequence[int]) -> int:
        if not attendance_ids:
            raise ValidationError("At least one record id is required")
        ids = sorted({require_positive_int(i, "attendance_id") for i in attendance_ids})
        count = self._attendance.delete_many(ids)
        logger.info("operator deleted %d of %d attendance records", count, len(ids))
        return count
