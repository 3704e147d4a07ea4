from __future__ import annotations

from .base import OvertimeCalculator
from ...employees.model import Employee
from ...overtime.model import OvertimeRecord
from ..intervals import hours_worked
from ..valuation import overtime_value


class StandardOvertimeCalculator(OvertimeCalculator):
    """Standard rule: (end - start) in hours, valued at salary / 220 x premium."""

    def hours(self, record: OvertimeRecord) -> float:
        return hours_worked(record.start_time, record.end_time)

    def value(self, record: OvertimeRecord, employee: Employee) -> float:
        return overtime_value(employee.base_salary, self.hours(record), record.service_type)
