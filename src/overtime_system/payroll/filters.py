from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from ..common.datetime_utils import DateLike, as_calendar_date
from ..core.constants import ALL_EMPLOYEES
from ..employees.model import Employee
from ..overtime.model import OvertimeRecord
from .model import ReceiptSummary


@dataclass(frozen=True)
class RecordFilter:
    """Employee selector plus inclusive date bounds; None bounds are open."""

    employee_id: str = ALL_EMPLOYEES
    start_date: Optional[DateLike] = None
    end_date: Optional[DateLike] = None

    @property
    def single_employee(self) -> bool:
        return bool(self.employee_id) and self.employee_id != ALL_EMPLOYEES


def filter_records(records: Iterable[OvertimeRecord], criteria: RecordFilter) -> list[OvertimeRecord]:
    """Records matching the employee selector and falling inside the period.

    Dates are compared as calendar days, so a bound given as a datetime or an
    ISO timestamp never shifts by a time zone offset.
    """
    start = as_calendar_date(criteria.start_date) if criteria.start_date else None
    end = as_calendar_date(criteria.end_date) if criteria.end_date else None

    out: list[OvertimeRecord] = []
    for r in records:
        if criteria.single_employee and r.employee_id != criteria.employee_id:
            continue
        day = as_calendar_date(r.date)
        if start and day < start:
            continue
        if end and day > end:
            continue
        out.append(r)
    return out


def search_by_employee_name(
    records: Iterable[OvertimeRecord],
    employees: Mapping[str, Employee],
    term: str,
) -> list[OvertimeRecord]:
    """Keep records whose employee name contains ``term`` (case-insensitive).

    Records of unknown employees are dropped.
    """
    needle = (term or "").upper()
    out: list[OvertimeRecord] = []
    for r in records:
        employee = employees.get(r.employee_id)
        if employee and needle in employee.name.upper():
            out.append(r)
    return out


def filter_summaries_by_name(summaries: Iterable[ReceiptSummary], term: str) -> list[ReceiptSummary]:
    needle = (term or "").upper()
    return [s for s in summaries if needle in s.employee_name.upper()]
