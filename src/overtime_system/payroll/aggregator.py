"""Roll overtime records up into per-employee, per-day and per-type buckets."""
from __future__ import annotations

from typing import Iterable, Mapping, Optional, Sequence

from loguru import logger

from ..core.enums import ServiceType
from ..employees.model import Employee
from ..overtime.model import OvertimeRecord
from .calculator.base import OvertimeCalculator
from .calculator.standard_calculator import StandardOvertimeCalculator
from .model import DailyHours, ReceiptSummary, ServiceTypeHours

_default_calculator = StandardOvertimeCalculator()


def index_employees(employees: Iterable[Employee]) -> dict[str, Employee]:
    return {e.employee_id: e for e in employees}


def aggregate_by_employee(
    records: Iterable[OvertimeRecord],
    employees: Iterable[Employee] | Mapping[str, Employee],
    *,
    calculator: Optional[OvertimeCalculator] = None,
) -> dict[str, ReceiptSummary]:
    """Total hours, value and last date per employee.

    Records whose ``employee_id`` does not resolve are skipped.
    """
    calc = calculator or _default_calculator
    by_id = employees if isinstance(employees, Mapping) else index_employees(employees)

    acc: dict[str, dict] = {}
    skipped = 0
    for r in records:
        employee = by_id.get(r.employee_id)
        if employee is None:
            skipped += 1
            continue

        hours = calc.hours(r)
        value = calc.value(r, employee)

        s = acc.get(employee.employee_id)
        if s is None:
            s = {"total_hours": 0.0, "total_value": 0.0, "last_date": r.date, "employee": employee}
            acc[employee.employee_id] = s
        s["total_hours"] += hours
        s["total_value"] += value
        if r.date > s["last_date"]:
            s["last_date"] = r.date

    if skipped:
        logger.debug(f"{skipped} registro(s) com funcionário desconhecido ignorado(s)")

    return {
        employee_id: ReceiptSummary(
            employee_id=employee_id,
            employee_code=s["employee"].code,
            employee_name=s["employee"].name,
            total_hours=s["total_hours"],
            total_value=s["total_value"],
            last_date=s["last_date"],
        )
        for employee_id, s in acc.items()
    }


def aggregate_by_day(
    records: Iterable[OvertimeRecord],
    *,
    calculator: Optional[OvertimeCalculator] = None,
) -> list[DailyHours]:
    """Hours per calendar day, ascending by date. No money involved."""
    calc = calculator or _default_calculator
    totals: dict[str, float] = {}
    for r in records:
        totals[r.date] = totals.get(r.date, 0.0) + calc.hours(r)
    return [DailyHours(date=d, hours=h) for d, h in sorted(totals.items())]


def aggregate_by_service_type(
    records: Iterable[OvertimeRecord],
    *,
    calculator: Optional[OvertimeCalculator] = None,
) -> list[ServiceTypeHours]:
    """Hours per service type (60% first), empty buckets dropped."""
    calc = calculator or _default_calculator
    totals = {t: 0.0 for t in ServiceType}
    for r in records:
        totals[ServiceType(r.service_type)] += calc.hours(r)
    return [ServiceTypeHours(service_type=t, hours=h) for t, h in totals.items() if h > 0]


def period_totals(
    records: Sequence[OvertimeRecord],
    employees: Iterable[Employee] | Mapping[str, Employee],
    *,
    calculator: Optional[OvertimeCalculator] = None,
) -> tuple[float, float]:
    """(total hours, total value) over records whose employee resolves."""
    summaries = aggregate_by_employee(records, employees, calculator=calculator)
    total_hours = sum(s.total_hours for s in summaries.values())
    total_value = sum(s.total_value for s in summaries.values())
    return total_hours, total_value
