from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Employee
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, first_name, middle_name, last_name, username, is_active
                FROM employees
                WHERE employee_id=%s
                """,
                (employee_id,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return Employee(
                employee_id=int(row["employee_id"]),
                first_name=row["first_name"],
                middle_name=row.get("middle_name"),
                last_name=row["last_name"],
                username=row["username"],
                is_active=bool(row.get("is_active", True)),
            )
