from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Timeliness of the most recent classified time-in/time-out write."""

    OVERTIME = "OVERTIME"
    UNDERTIME = "UNDERTIME"
    EXACT_TIME = "EXACT_TIME"


class EventType(str, Enum):
    CHECK_IN = "CHECK_IN"
    CHECK_OUT = "CHECK_OUT"

    @classmethod
    def parse(cls, value: str) -> "EventType":
        """Accept both our names and the scanner's TIME_IN/TIME_OUT aliases."""
        v = (value or "").strip().upper()
        aliases = {"TIME_IN": cls.CHECK_IN, "TIME_OUT": cls.CHECK_OUT}
        if v in aliases:
            return aliases[v]
        return cls(v)
