from __future__ import annotations

from datetime import date
from typing import Optional

from loguru import logger

from ..core.constants import DEFAULT_TOP_N, UNKNOWN_EMPLOYEE_NAME
from .aggregator import (
    aggregate_by_day,
    aggregate_by_employee,
    aggregate_by_service_type,
    index_employees,
    period_totals,
)
from .calculator.base import OvertimeCalculator
from .calculator.standard_calculator import StandardOvertimeCalculator
from .filters import RecordFilter, filter_records, filter_summaries_by_name, search_by_employee_name
from .model import DashboardData, OvertimeRow, ReceiptSummary, Snapshot
from .sorting import SortConfig, sort_records, top_employees_by_hours


class PayrollReportService:
    """Read-side use cases: dashboard, receipts and the overtime listing.

    Every call works on the snapshot it is given; callers re-invoke it whenever
    the store pushes a new snapshot.
    """

    def __init__(self, *, calculator: Optional[OvertimeCalculator] = None, top_n: int = DEFAULT_TOP_N):
        self._calculator = calculator or StandardOvertimeCalculator()
        self._top_n = int(top_n)

    def recompute(self, snapshot: Snapshot, criteria: RecordFilter) -> DashboardData:
        employees = index_employees(snapshot.employees)
        records = filter_records(snapshot.records, criteria)
        total_hours, total_value = period_totals(records, employees, calculator=self._calculator)

        single = criteria.single_employee
        top = [] if single else top_employees_by_hours(
            records, employees, limit=self._top_n, calculator=self._calculator
        )
        by_type = aggregate_by_service_type(records, calculator=self._calculator) if single else []

        logger.debug(f"Dashboard recalculado: {len(records)} registro(s) no período")
        return DashboardData(
            active_employees=sum(1 for e in snapshot.employees if e.is_active),
            total_hours=total_hours,
            total_value=total_value,
            daily=aggregate_by_day(records, calculator=self._calculator),
            top_employees=top,
            service_types=by_type,
            selected_employee_id=criteria.employee_id if single else None,
        )

    def build_receipts(
        self,
        snapshot: Snapshot,
        *,
        start_date: Optional[date | str] = None,
        end_date: Optional[date | str] = None,
        search: str = "",
    ) -> list[ReceiptSummary]:
        records = filter_records(snapshot.records, RecordFilter(start_date=start_date, end_date=end_date))
        summaries = aggregate_by_employee(records, snapshot.employees, calculator=self._calculator)
        return filter_summaries_by_name(summaries.values(), search)

    @staticmethod
    def receipt_totals(summaries: list[ReceiptSummary]) -> tuple[float, float]:
        return (
            sum(s.total_hours for s in summaries),
            sum(s.total_value for s in summaries),
        )

    def build_overtime_rows(
        self,
        snapshot: Snapshot,
        *,
        criteria: Optional[RecordFilter] = None,
        search: str = "",
        sort: Optional[SortConfig] = None,
    ) -> list[OvertimeRow]:
        employees = index_employees(snapshot.employees)
        sort = sort or SortConfig()

        records = filter_records(snapshot.records, criteria or RecordFilter())
        records = search_by_employee_name(records, employees, search)
        records = sort_records(
            records, sort.key, sort.direction, employees=employees, calculator=self._calculator
        )

        rows: list[OvertimeRow] = []
        for r in records:
            employee = employees.get(r.employee_id)
            rows.append(
                OvertimeRow(
                    record=r,
                    employee_name=employee.name if employee else UNKNOWN_EMPLOYEE_NAME,
                    hours=self._calculator.hours(r),
                    value=self._calculator.value(r, employee) if employee else 0.0,
                )
            )
        return rows
