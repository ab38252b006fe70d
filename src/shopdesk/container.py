from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .reports.service import AttendanceReportService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection | None

    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository

    report_service: AttendanceReportService
    attendance_service: AttendanceService


def build_services(
    *,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    conn: DatabaseConnection | None = None,
    require_active_employee: bool = True,
) -> Container:
    report_service = AttendanceReportService()
    attendance_service = AttendanceService(
        attendance_repo,
        employees_repo,
        reports=report_service,
        require_active_employee=require_active_employee,
    )
    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        report_service=report_service,
        attendance_service=attendance_service,
    )


def build_container(*, db_config: dict, require_active_employee: bool = True) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))
    return build_services(
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        conn=conn,
        require_active_employee=require_active_employee,
    )
