from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Optional

from ..common.datetime_utils import as_calendar_date
from ..core.constants import DEFAULT_TOP_N, UNKNOWN_EMPLOYEE_NAME
from ..core.enums import SortDirection, SortKey
from ..employees.model import Employee
from ..overtime.model import OvertimeRecord
from .aggregator import aggregate_by_employee
from .calculator.base import OvertimeCalculator
from .calculator.standard_calculator import StandardOvertimeCalculator
from .model import RankedEmployee


def _fold(text: Any) -> str:
    """Case- and accent-insensitive collation key (``É`` sorts with ``e``)."""
    decomposed = unicodedata.normalize("NFKD", str(text))
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


@dataclass(frozen=True)
class SortConfig:
    key: SortKey = SortKey.DATE
    direction: SortDirection = SortDirection.DESCENDING

    def request(self, key: SortKey) -> "SortConfig":
        """Clicking the active ascending column flips it; anything else sorts ascending."""
        key = SortKey(key)
        if key == self.key and self.direction == SortDirection.ASCENDING:
            return SortConfig(key=key, direction=SortDirection.DESCENDING)
        return SortConfig(key=key, direction=SortDirection.ASCENDING)


def _key_func(
    key: SortKey,
    employees: Mapping[str, Employee],
    calc: OvertimeCalculator,
) -> Callable[[OvertimeRecord], Any]:
    if key == SortKey.EMPLOYEE_NAME:
        def employee_name(r: OvertimeRecord) -> str:
            e = employees.get(r.employee_id)
            return _fold(e.name if e else UNKNOWN_EMPLOYEE_NAME)
        return employee_name
    if key == SortKey.HOURS:
        return calc.hours
    if key == SortKey.VALUE:
        def value(r: OvertimeRecord) -> float:
            e = employees.get(r.employee_id)
            return calc.value(r, e) if e else 0.0
        return value
    if key == SortKey.DATE:
        return lambda r: as_calendar_date(r.date)
    if key == SortKey.SERVICE_TYPE:
        return lambda r: _fold(getattr(r.service_type, "value", r.service_type))
    return lambda r: _fold(getattr(r, key.value))


def sort_records(
    records: Iterable[OvertimeRecord],
    key: SortKey | str = SortKey.DATE,
    direction: SortDirection | str = SortDirection.DESCENDING,
    *,
    employees: Optional[Mapping[str, Employee]] = None,
    calculator: Optional[OvertimeCalculator] = None,
) -> list[OvertimeRecord]:
    """Stable sort of records by a record field or a derived key.

    Equal keys keep their input order in both directions.
    """
    key = SortKey(key)
    direction = SortDirection(direction)
    func = _key_func(key, employees or {}, calculator or StandardOvertimeCalculator())
    # sorted(reverse=True) keeps equal elements in input order.
    return sorted(records, key=func, reverse=direction == SortDirection.DESCENDING)


def top_employees_by_hours(
    records: Iterable[OvertimeRecord],
    employees: Mapping[str, Employee],
    *,
    limit: int = DEFAULT_TOP_N,
    calculator: Optional[OvertimeCalculator] = None,
) -> list[RankedEmployee]:
    """Top ``limit`` employees by hours in the given records; zero-hour entries dropped."""
    summaries = aggregate_by_employee(records, employees, calculator=calculator)
    ranked = sorted(summaries.values(), key=lambda s: s.total_hours, reverse=True)
    return [
        RankedEmployee(employee_id=s.employee_id, name=s.employee_name, hours=s.total_hours)
        for s in ranked[:limit]
        if s.total_hours > 0
    ]
