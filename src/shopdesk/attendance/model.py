from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one calendar day."""

    attendance_id: int
    employee_id: int
    work_date: date
    time_in: Optional[datetime]
    time_out: Optional[datetime]
    status: Optional[AttendanceStatus]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        """Checked in but not yet checked out."""
        return self.time_in is not None and self.time_out is None

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "employee_id": self.employee_id,
            "date": self.work_date.isoformat(),
            "time_in": self.time_in.isoformat() if self.time_in else None,
            "time_out": self.time_out.isoformat() if self.time_out else None,
            "status": self.status.value if self.status else None,
        }


@dataclass(frozen=True)
class AttendanceListRow:
    """Read-model for the record list (record joined with employee names)."""

    record: AttendanceRecord
    first_name: str
    last_name: str
    username: str

    def to_dict(self) -> dict:
        out = self.record.to_dict()
        out["employee"] = {
            "first_name": self.first_name,
            "last_name": self.last_name,
            "username": self.username,
        }
        return out


@dataclass(frozen=True)
class AttendanceFilter:
    employee_id: Optional[int] = None
    work_date: Optional[date] = None
    search: Optional[str] = None


@dataclass(frozen=True)
class AttendanceStats:
    total_days: int
    complete_days: int
    incomplete_days: int
    total_hours: float
    average_hours: float

    def to_dict(self) -> dict:
        return {
            "total_days": self.total_days,
            "complete_days": self.complete_days,
            "incomplete_days": self.incomplete_days,
            "total_hours": self.total_hours,
            "average_hours": self.average_hours,
        }
