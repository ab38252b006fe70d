from __future__ import annotations

from datetime import date, datetime, time, timedelta


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 timestamp in naive local time; UTC offsets are rejected."""
    moment = datetime.fromisoformat(value.strip())
    if moment.tzinfo is not None:
        raise ValueError(f"{value!r} carries a UTC offset, expected local time")
    return moment


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """Half-open [local midnight, next midnight) window for a calendar day."""
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)


def at_hour(moment: datetime, hour: int) -> datetime:
    """Same calendar day as ``moment`` at ``hour``:00:00.000000."""
    return moment.replace(hour=hour, minute=0, second=0, microsecond=0)
