from __future__ import annotations

import calendar
from datetime import date, datetime
from typing import Union

DateLike = Union[date, datetime, str]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_br_date(value: str) -> date:
    """Parse DD/MM/YYYY string into date (raises ValueError for impossible dates)."""
    return datetime.strptime(value.strip(), "%d/%m/%Y").date()


def as_calendar_date(value: DateLike) -> date:
    """Normalize to a plain calendar day.

    ISO strings may carry a time part (``2024-01-05T23:00:00Z``); only the
    leading ``YYYY-MM-DD`` is used so no time zone shift can move the day.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(str(value).strip()[:10])


def month_range(day: date) -> tuple[date, date]:
    """First and last day of the month containing ``day``."""
    last = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last)


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()
