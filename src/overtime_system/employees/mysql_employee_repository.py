from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, parse_db_id
from .model import Employee, EmployeeDraft
from .repository import EmployeeRepository

_COLUMNS = "employee_id, code, name, base_salary, is_active"


def _to_employee(row: dict) -> Employee:
    return Employee(
        employee_id=str(row["employee_id"]),
        code=row["code"],
        name=row["name"],
        base_salary=float(row["base_salary"]),
        is_active=bool(row.get("is_active", True)),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        key = parse_db_id(employee_id)
        if key is None:
            return None
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (key,))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def get_by_code(self, code: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE UPPER(code)=%s", (code.upper(),))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY name ASC")
            return [_to_employee(r) for r in fetchall(cur)]

    def create(self, draft: EmployeeDraft, *, is_active: bool = True) -> str:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(code, name, base_salary, is_active)
                VALUES(%s,%s,%s,%s)
                """,
                (draft.code, draft.name, draft.base_salary, int(is_active)),
            )
            return str(cur.lastrowid)

    def update(self, employee_id: str, *, code: str, name: str, base_salary: float) -> bool:
        key = parse_db_id(employee_id)
        if key is None:
            return False
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE employees SET code=%s, name=%s, base_salary=%s WHERE employee_id=%s",
                (code, name, base_salary, key),
            )
            return cur.rowcount > 0

    def set_active(self, employee_id: str, *, is_active: bool) -> bool:
        key = parse_db_id(employee_id)
        if key is None:
            return False
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE employees SET is_active=%s WHERE employee_id=%s",
                (int(is_active), key),
            )
            return cur.rowcount > 0
