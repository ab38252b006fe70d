from datetime import datetime

import pytest

from shopdesk.attendance.classifier import classify, classify_event
from shopdesk.core.enums import AttendanceStatus, EventType

DAY = (8, 18)
EVENING = (18, 22)


@pytest.mark.parametrize(
    "moment, expected",
    [
        (datetime(2026, 2, 2, 8, 0, 0), AttendanceStatus.EXACT_TIME),
        (datetime(2026, 2, 2, 8, 15, 0), AttendanceStatus.UNDERTIME),
        (datetime(2026, 2, 2, 7, 45, 0), AttendanceStatus.OVERTIME),
    ],
)
def test_day_shift_check_in(moment, expected):
    assert classify(moment, EventType.CHECK_IN, *DAY) == expected


@pytest.mark.parametrize(
    "moment, expected",
    [
        (datetime(2026, 2, 2, 18, 0, 0), AttendanceStatus.EXACT_TIME),
        (datetime(2026, 2, 2, 18, 30, 0), AttendanceStatus.OVERTIME),
        (datetime(2026, 2, 2, 17, 45, 0), AttendanceStatus.UNDERTIME),
    ],
)
def test_day_shift_check_out(moment, expected):
    assert classify(moment, EventType.CHECK_OUT, *DAY) == expected


def test_one_microsecond_late_is_not_exact():
    late = datetime(2026, 2, 2, 8, 0, 0, 1)
    assert classify(late, EventType.CHECK_IN, *DAY) == AttendanceStatus.UNDERTIME


def test_classify_is_deterministic():
    moment = datetime(2026, 2, 2, 9, 30)
    results = {classify(moment, EventType.CHECK_IN, *DAY) for _ in range(5)}
    classify(datetime(2026, 2, 2, 7, 0), EventType.CHECK_OUT, *EVENING)

    assert results == {AttendanceStatus.UNDERTIME}
    assert classify(moment, EventType.CHECK_IN, *DAY) == AttendanceStatus.UNDERTIME


def test_evening_check_in_after_start_is_undertime():
    assert classify_event(datetime(2026, 2, 2, 19, 0, 0), EventType.CHECK_IN) == AttendanceStatus.UNDERTIME


def test_afternoon_check_in_counts_as_early_for_evening_shift():
    assert classify_event(datetime(2026, 2, 2, 13, 0, 0), EventType.CHECK_IN) == AttendanceStatus.OVERTIME


def test_check_out_follows_paired_check_in_shift():
    # Day worker leaving at 19:00 stayed past 18:00.
    status = classify_event(
        datetime(2026, 2, 2, 19, 0, 0),
        EventType.CHECK_OUT,
        check_in_time=datetime(2026, 2, 2, 8, 0, 0),
    )
    assert status == AttendanceStatus.OVERTIME


def test_evening_check_out_at_22_is_exact():
    status = classify_event(
        datetime(2026, 2, 2, 22, 0, 0),
        EventType.CHECK_OUT,
        check_in_time=datetime(2026, 2, 2, 18, 5, 0),
    )
    assert status == AttendanceStatus.EXACT_TIME
