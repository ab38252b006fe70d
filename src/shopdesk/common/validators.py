from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any, Optional

from ..core.exceptions import ValidationError


def require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a positive integer")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a positive integer")
    if number <= 0:
        raise ValidationError(f"{field_name} must be a positive integer")
    return number


def require_time_order(time_in: Optional[datetime], time_out: Optional[datetime]) -> None:
    """time_out needs a time_in and must not precede it."""
    if time_out is None:
        return
    if time_in is None:
        raise ValidationError("time_out cannot be set without time_in")
    if time_out < time_in:
        raise ValidationError("time_out cannot be earlier than time_in")


def require_work_day(work_date: date, time_in: Optional[datetime], time_out: Optional[datetime]) -> None:
    """time_in falls on work_date; time_out on work_date or the day after."""
    for moment in (time_in, time_out):
        if moment is not None and moment.tzinfo is not None:
            raise ValidationError("times must be local, without a UTC offset")
    if time_in is not None and time_in.date() != work_date:
        raise ValidationError(f"time_in must fall on {work_date.isoformat()}")
    if time_out is not None and time_out.date() not in (work_date, work_date + timedelta(days=1)):
        raise ValidationError(f"time_out must fall on {work_date.isoformat()} or the following day")
