from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from shopdesk.core.enums import AttendanceStatus
from shopdesk.core.exceptions import EmployeeNotFound, RecordNotFound, ValidationError


def test_create_record_takes_operator_status(service):
    record = service.create_record(
        employee_id=1,
        time_in=datetime(2026, 1, 5, 8, 30),
        time_out=datetime(2026, 1, 5, 17, 0),
        status=AttendanceStatus.UNDERTIME,
    )

    assert record.work_date == date(2026, 1, 5)
    assert record.status == AttendanceStatus.UNDERTIME


def test_create_record_for_inactive_employee_is_allowed(service):
    record = service.create_record(employee_id=3, work_date=date(2026, 1, 5))

    assert record.time_in is None


def test_create_record_unknown_employee(service):
    with pytest.raises(EmployeeNotFound):
        service.create_record(employee_id=42, work_date=date(2026, 1, 5))


def test_create_record_rejects_time_out_before_time_in(service):
    with pytest.raises(ValidationError):
        service.create_record(
            employee_id=1,
            time_in=datetime(2026, 1, 5, 9, 0),
            time_out=datetime(2026, 1, 5, 8, 0),
        )


def test_create_record_rejects_time_out_without_time_in(service):
    with pytest.raises(ValidationError):
        service.create_record(employee_id=1, time_out=datetime(2026, 1, 5, 18, 0))


def test_create_record_keeps_one_record_per_day(service, attendance_repo):
    service.create_record(employee_id=1, time_in=datetime(2026, 1, 5, 8, 0))

    with pytest.raises(ValidationError):
        service.create_record(employee_id=1, work_date=date(2026, 1, 5))
    assert len(attendance_repo.all()) == 1


def test_update_record_merges_fields(service, fixed_now):
    created = service.check_in(1, now=fixed_now)

    updated = service.update_record(
        created.attendance_id,
        time_out=fixed_now.replace(hour=17),
        status=AttendanceStatus.UNDERTIME,
    )

    assert updated.time_in == fixed_now
    assert updated.time_out == fixed_now.replace(hour=17)
    assert updated.status == AttendanceStatus.UNDERTIME


def test_update_record_validates_order(service, fixed_now):
    created = service.check_in(1, now=fixed_now)

    with pytest.raises(ValidationError):
        service.update_record(created.attendance_id, time_out=fixed_now.replace(hour=7))


def test_update_missing_record(service):
    with pytest.raises(RecordNotFound):
        service.update_record(404, status=AttendanceStatus.EXACT_TIME)


def test_delete_record(service, attendance_repo, fixed_now):
    created = service.check_in(1, now=fixed_now)

    service.delete_record(created.attendance_id)

    assert attendance_repo.all() == []
    with pytest.raises(RecordNotFound):
        service.delete_record(created.attendance_id)


def test_delete_records_bulk(service, attendance_repo, fixed_now):
    a = service.check_in(1, now=fixed_now)
    b = service.check_in(2, now=fixed_now)

    assert service.delete_records([a.attendance_id, b.attendance_id, a.attendance_id, 999]) == 2
    assert attendance_repo.all() == []


def test_delete_records_requires_ids(service):
    with pytest.raises(ValidationError):
        service.delete_records([])


def test_create_record_time_in_must_fall_on_work_date(service, attendance_repo):
    with pytest.raises(ValidationError):
        service.create_record(employee_id=1, work_date=date(2026, 1, 5), time_in=datetime(2026, 1, 9, 8, 0))
    assert attendance_repo.all() == []


def test_create_record_allows_time_out_past_midnight(service):
    record = service.create_record(
        employee_id=1,
        work_date=date(2026, 1, 5),
        time_in=datetime(2026, 1, 5, 18, 0),
        time_out=datetime(2026, 1, 6, 0, 30),
    )

    assert record.time_out == datetime(2026, 1, 6, 0, 30)


def test_create_record_rejects_time_out_two_days_later(service):
    with pytest.raises(ValidationError):
        service.create_record(
            employee_id=1,
            work_date=date(2026, 1, 5),
            time_in=datetime(2026, 1, 5, 8, 0),
            time_out=datetime(2026, 1, 7, 8, 0),
        )


def test_update_record_keeps_times_on_work_date(service, fixed_now):
    created = service.check_in(1, now=fixed_now)

    with pytest.raises(ValidationError):
        service.update_record(created.attendance_id, time_in=fixed_now + timedelta(days=3))
    assert service.get_today_record(1, fixed_now.date()).time_in == fixed_now


def test_manual_times_with_utc_offset_rejected(service):
    with pytest.raises(ValidationError):
        service.create_record(employee_id=1, time_in=datetime(2026, 1, 5, 8, 0, tzinfo=timezone.utc))
