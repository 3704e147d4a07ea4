from __future__ import annotations

from abc import ABC, abstractmethod

from ...employees.model import Employee
from ...overtime.model import OvertimeRecord


class OvertimeCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def hours(self, record: OvertimeRecord) -> float:
        raise NotImplementedError

    @abstractmethod
    def value(self, record: OvertimeRecord, employee: Employee) -> float:
        raise NotImplementedError
