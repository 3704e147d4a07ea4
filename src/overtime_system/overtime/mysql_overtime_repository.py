from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import ServiceType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, mysql_date_to_str, mysql_time_to_str, parse_db_id
from .model import OvertimeDraft, OvertimeRecord
from .repository import OvertimeRepository

_COLUMNS = "record_id, employee_id, work_date, start_time, end_time, service_type, observation"


def _to_record(row: dict) -> OvertimeRecord:
    return OvertimeRecord(
        record_id=str(row["record_id"]),
        employee_id=str(row["employee_id"]),
        date=mysql_date_to_str(row["work_date"]),
        start_time=mysql_time_to_str(row["start_time"]),
        end_time=mysql_time_to_str(row["end_time"]),
        service_type=ServiceType(row["service_type"]),
        observation=row.get("observation") or "",
    )


def _params(draft: OvertimeDraft) -> tuple:
    return (
        int(draft.employee_id),
        draft.date,
        draft.start_time,
        draft.end_time,
        ServiceType(draft.service_type).value,
        draft.observation,
    )


class MySQLOvertimeRepository(OvertimeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, record_id: str) -> Optional[OvertimeRecord]:
        key = parse_db_id(record_id)
        if key is None:
            return None
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM overtime_records WHERE record_id=%s", (key,))
            row = fetchone(cur)
            return _to_record(row) if row else None

    def list_all(self) -> Sequence[OvertimeRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM overtime_records ORDER BY work_date DESC, record_id DESC")
            return [_to_record(r) for r in fetchall(cur)]

    def create(self, draft: OvertimeDraft) -> str:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO overtime_records(employee_id, work_date, start_time, end_time, service_type, observation)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                _params(draft),
            )
            return str(cur.lastrowid)

    def update(self, record_id: str, draft: OvertimeDraft) -> bool:
        key = parse_db_id(record_id)
        if key is None:
            return False
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE overtime_records
                SET employee_id=%s, work_date=%s, start_time=%s, end_time=%s, service_type=%s, observation=%s
                WHERE record_id=%s
                """,
                _params(draft) + (key,),
            )
            return cur.rowcount > 0

    def delete(self, record_id: str) -> bool:
        key = parse_db_id(record_id)
        if key is None:
            return False
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM overtime_records WHERE record_id=%s", (key,))
            return cur.rowcount > 0
