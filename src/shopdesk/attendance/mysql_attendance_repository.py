from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import day_bounds
from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceFilter, AttendanceListRow, AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = "ar.attendance_id, ar.employee_id, ar.work_date, ar.time_in, ar.time_out, ar.status, ar.created_at, ar.updated_at"


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        employee_id=int(r["employee_id"]),
        work_date=r["work_date"],
        time_in=r.get("time_in"),
        time_out=r.get("time_out"),
        status=AttendanceStatus(r["status"]) if r.get("status") else None,
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


def _like_pattern(term: str) -> str:
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_records ar WHERE ar.attendance_id=%s",
                (int(attendance_id),),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_records ar WHERE ar.employee_id=%s AND ar.work_date=%s",
                (int(employee_id), work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def create(
        self,
        *,
        employee_id: int,
        work_date: date,
        time_in: Optional[datetime],
        time_out: Optional[datetime],
        status: Optional[AttendanceStatus],
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(employee_id, work_date, time_in, time_out, status)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (int(employee_id), work_date, time_in, time_out, status.value if status else None),
            )
            return int(cur.lastrowid)

    def set_time_in(self, *, attendance_id: int, time_in: datetime, status: AttendanceStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET time_in=%s, status=%s
                WHERE attendance_id=%s AND time_in IS NULL
                """,
                (time_in, status.value, int(attendance_id)),
            )
            return cur.rowcount > 0

    def set_time_out(self, *, attendance_id: int, time_out: datetime, status: AttendanceStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET time_out=%s, status=%s
                WHERE attendance_id=%s AND time_in IS NOT NULL AND time_out IS NULL
                """,
                (time_out, status.value, int(attendance_id)),
            )
            return cur.rowcount > 0

    def update(
        self,
        *,
        attendance_id: int,
        time_in: Optional[datetime],
        time_out: Optional[datetime],
        status: Optional[AttendanceStatus],
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET time_in=%s, time_out=%s, status=%s
                WHERE attendance_id=%s
                """,
                (time_in, time_out, status.value if status else None, int(attendance_id)),
            )
            if cur.rowcount > 0:
                return True
            # MySQL reports 0 affected rows when the values did not change.
            cur.execute("SELECT 1 AS found FROM attendance_records WHERE attendance_id=%s", (int(attendance_id),))
            return fetchone(cur) is not None

    def delete(self, attendance_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_records WHERE attendance_id=%s", (int(attendance_id),))
            return cur.rowcount > 0

    def delete_many(self, attendance_ids: Sequence[int]) -> int:
        ids = [int(i) for i in attendance_ids]
        if not ids:
            return 0
        placeholders = ",".join(["%s"] * len(ids))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM attendance_records WHERE attendance_id IN ({placeholders})", tuple(ids))
            return int(cur.rowcount)

    def list_records(self, flt: AttendanceFilter) -> Sequence[AttendanceListRow]:
        clauses: list[str] = []
        params: list[object] = []

        if flt.employee_id is not None:
            clauses.append("ar.employee_id=%s")
            params.append(int(flt.employee_id))
        if flt.work_date is not None:
            start, end = day_bounds(flt.work_date)
            clauses.append("ar.work_date >= %s AND ar.work_date < %s")
            params.extend([start.date(), end.date()])
        if flt.search:
            pattern = _like_pattern(flt.search)
            clauses.append("(e.first_name LIKE %s OR e.last_name LIKE %s OR e.username LIKE %s)")
            params.extend([pattern, pattern, pattern])

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}, e.first_name, e.last_name, e.username
                FROM attendance_records ar
                JOIN employees e ON e.employee_id = ar.employee_id
                {where}
                ORDER BY ar.work_date DESC, ar.attendance_id DESC
                """,
                tuple(params),
            )
            return [
                AttendanceListRow(
                    record=_to_record(r),
                    first_name=r["first_name"],
                    last_name=r["last_name"],
                    username=r["username"],
                )
                for r in fetchall(cur)
            ]

    def get_recent_for_employee(self, employee_id: int, limit: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records ar
                WHERE ar.employee_id=%s
                ORDER BY ar.work_date DESC
                LIMIT %s
                """,
                (int(employee_id), int(limit)),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_for_employee_since(self, employee_id: int, since: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records ar
                WHERE ar.employee_id=%s AND ar.work_date >= %s
                ORDER BY ar.work_date DESC
                """,
                (int(employee_id), since),
            )
            return [_to_record(r) for r in fetchall(cur)]
