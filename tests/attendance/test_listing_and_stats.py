from __future__ import annotations

from datetime import date, datetime

import pytest

from shopdesk.core.enums import AttendanceStatus
from shopdesk.core.exceptions import ValidationError


@pytest.fixture
def seeded(service):
    service.create_record(employee_id=1, time_in=datetime(2026, 2, 1, 8, 0), time_out=datetime(2026, 2, 1, 18, 0))
    service.create_record(employee_id=1, time_in=datetime(2026, 2, 2, 0, 0), time_out=datetime(2026, 2, 2, 6, 30))
    service.create_record(employee_id=2, time_in=datetime(2026, 2, 2, 9, 0))
    service.create_record(employee_id=2, time_in=datetime(2026, 2, 3, 0, 0))
    return service


def test_list_all_newest_first(seeded):
    rows = seeded.list_records()

    assert [r.record.work_date for r in rows] == [date(2026, 2, 3), date(2026, 2, 2), date(2026, 2, 2), date(2026, 2, 1)]


def test_list_by_date_covers_whole_day_only(seeded):
    rows = seeded.list_records(work_date=date(2026, 2, 2))

    assert {r.record.employee_id for r in rows} == {1, 2}
    assert all(r.record.work_date == date(2026, 2, 2) for r in rows)


def test_list_by_employee_and_search(seeded):
    assert len(seeded.list_records(employee_id=1)) == 2
    assert {r.username for r in seeded.list_records(search="REY")} == {"jreyes"}
    assert seeded.list_records(search="   ") == seeded.list_records()


def test_list_row_serializes_employee_names(seeded):
    row = seeded.list_records(employee_id=2, work_date=date(2026, 2, 2))[0]

    data = row.to_dict()
    assert data["employee"] == {"first_name": "Jose", "last_name": "Reyes", "username": "jreyes"}
    assert data["time_out"] is None
    assert data["status"] is None


def test_history_limit(seeded):
    history = seeded.get_history(2, limit=1)

    assert len(history) == 1
    assert history[0].work_date == date(2026, 2, 3)
    with pytest.raises(ValidationError):
        seeded.get_history(2, limit=0)


def test_stats_counts_complete_and_incomplete_days(seeded):
    stats = seeded.get_stats(1, now=datetime(2026, 2, 10, 12, 0))

    assert stats.total_days == 2
    assert stats.complete_days == 2
    assert stats.incomplete_days == 0
    assert stats.total_hours == 16.5
    assert stats.average_hours == 8.25


def test_stats_window_excludes_old_records(seeded):
    stats = seeded.get_stats(2, now=datetime(2026, 3, 4, 12, 0), days=30)

    assert stats.total_days == 1
    assert stats.incomplete_days == 1
    assert stats.total_hours == 0
    assert stats.average_hours == 0


def test_stats_window_spans_exactly_the_requested_days(seeded):
    assert seeded.get_stats(2, now=datetime(2026, 2, 3, 23, 0), days=1).total_days == 1
    assert seeded.get_stats(2, now=datetime(2026, 2, 3, 23, 0), days=2).total_days == 2
    assert seeded.get_stats(2, now=datetime(2026, 3, 5, 12, 0), days=30).total_days == 0


def test_classified_status_survives_listing(service, fixed_now):
    service.check_in(1, now=fixed_now.replace(minute=5))

    row = service.list_records(employee_id=1)[0]
    assert row.record.status == AttendanceStatus.UNDERTIME
