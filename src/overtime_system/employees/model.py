from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: Plain data object (no DB access code). ``code`` and ``name`` are kept
    upper-case; ``base_salary`` is the monthly salary.
    """

    employee_id: str
    code: str
    name: str
    base_salary: float
    is_active: bool = True


@dataclass(frozen=True)
class EmployeeDraft:
    """Field set for a new employee before the store assigns an id."""

    code: str
    name: str
    base_salary: float
