from __future__ import annotations

from datetime import datetime

import pytest

from fakes import InMemoryAttendance, InMemoryEmployees
from shopdesk.attendance.service import AttendanceService
from shopdesk.employees.model import Employee


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 8, 0, 0)


@pytest.fixture
def employees() -> InMemoryEmployees:
    repo = InMemoryEmployees()
    repo.add(Employee(employee_id=1, first_name="Maria", middle_name="Luz", last_name="Santos", username="msantos"))
    repo.add(Employee(employee_id=2, first_name="Jose", last_name="Reyes", username="jreyes"))
    repo.add(Employee(employee_id=3, first_name="Ana", last_name="Cruz", username="acruz", is_active=False))
    return repo


@pytest.fixture
def attendance_repo(employees) -> InMemoryAttendance:
    return InMemoryAttendance(employees)


@pytest.fixture
def service(attendance_repo, employees) -> AttendanceService:
    return AttendanceService(attendance_repo, employees)
