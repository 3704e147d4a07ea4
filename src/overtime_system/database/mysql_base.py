from __future__ import annotations

from contextlib import contextmanager
from datetime import date, time, timedelta
from typing import Any, Dict, List, Optional

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def parse_db_id(value: Any) -> Optional[int]:
    """AUTO_INCREMENT key from a route/JSON id; ``None`` when it cannot be one."""
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def mysql_time_to_str(value: Any) -> str:
    """Render a MySQL TIME column as ``HH:MM``, or ``HH:MM:SS`` when seconds are set.

    mysql-connector can return TIME as:
    - datetime.timedelta
    - datetime.time
    - string (e.g. '08:30:00')
    """
    if value is None:
        return ""
    if isinstance(value, time):
        total_seconds = value.hour * 3600 + value.minute * 60 + value.second
    elif isinstance(value, timedelta):
        total_seconds = int(value.total_seconds()) % 86400
    elif isinstance(value, str):
        if not value.strip():
            return ""
        parts = value.strip().split(":")
        total_seconds = int(parts[0]) * 3600 + int(parts[1]) * 60
        if len(parts) > 2:
            total_seconds += int(parts[2].split(".")[0])
    else:
        raise TypeError(f"Unsupported MySQL TIME value type: {type(value)!r}")

    h, rest = divmod(total_seconds, 3600)
    m, s = divmod(rest, 60)
    return f"{h:02d}:{m:02d}:{s:02d}" if s else f"{h:02d}:{m:02d}"


def mysql_date_to_str(value: Any) -> str:
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    return str(value)[:10]
