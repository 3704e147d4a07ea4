from __future__ import annotations

from dataclasses import replace
from typing import Optional

import pytest

from overtime_system.core.enums import ServiceType
from overtime_system.employees.model import Employee, EmployeeDraft
from overtime_system.overtime.model import OvertimeDraft, OvertimeRecord


class InMemoryEmployees:
    def __init__(self, employees: Optional[list[Employee]] = None):
        self._by_id: dict[str, Employee] = {e.employee_id: e for e in employees or []}
        self._id = len(self._by_id)

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._by_id.get(employee_id)

    def get_by_code(self, code: str) -> Optional[Employee]:
        for e in self._by_id.values():
            if e.code.upper() == code.upper():
                return e
        return None

    def list_all(self):
        return sorted(self._by_id.values(), key=lambda e: e.name)

    def create(self, draft: EmployeeDraft, *, is_active: bool = True) -> str:
        self._id += 1
        employee_id = f"e{self._id}"
        self._by_id[employee_id] = Employee(
            employee_id=employee_id,
            code=draft.code,
            name=draft.name,
            base_salary=draft.base_salary,
            is_active=is_active,
        )
        return employee_id

    def update(self, employee_id: str, *, code: str, name: str, base_salary: float) -> bool:
        e = self._by_id.get(employee_id)
        if not e:
            return False
        self._by_id[employee_id] = replace(e, code=code, name=name, base_salary=base_salary)
        return True

    def set_active(self, employee_id: str, *, is_active: bool) -> bool:
        e = self._by_id.get(employee_id)
        if not e:
            return False
        self._by_id[employee_id] = replace(e, is_active=is_active)
        return True


class InMemoryOvertime:
    def __init__(self, records: Optional[list[OvertimeRecord]] = None):
        self._by_id: dict[str, OvertimeRecord] = {r.record_id: r for r in records or []}
        self._id = len(self._by_id)

    def get_by_id(self, record_id: str) -> Optional[OvertimeRecord]:
        return self._by_id.get(record_id)

    def list_all(self):
        return sorted(self._by_id.values(), key=lambda r: r.date, reverse=True)

    def create(self, draft: OvertimeDraft) -> str:
        self._id += 1
        record_id = f"r{self._id}"
        self._by_id[record_id] = OvertimeRecord(record_id=record_id, **draft.__dict__)
        return record_id

    def update(self, record_id: str, draft: OvertimeDraft) -> bool:
        if record_id not in self._by_id:
            return False
        self._by_id[record_id] = OvertimeRecord(record_id=record_id, **draft.__dict__)
        return True

    def delete(self, record_id: str) -> bool:
        return self._by_id.pop(record_id, None) is not None


def make_record(record_id, employee_id, day, start, end, service_type=ServiceType.SIXTY, observation=""):
    return OvertimeRecord(
        record_id=record_id,
        employee_id=employee_id,
        date=day,
        start_time=start,
        end_time=end,
        service_type=service_type,
        observation=observation,
    )


@pytest.fixture
def employee_a() -> Employee:
    return Employee(employee_id="a", code="A01", name="ANA SOUZA", base_salary=2200, is_active=True)


@pytest.fixture
def employee_b() -> Employee:
    return Employee(employee_id="b", code="B02", name="BRUNO LIMA", base_salary=4400, is_active=True)


@pytest.fixture
def scenario_records() -> list[OvertimeRecord]:
    return [
        make_record("r1", "a", "2024-01-05", "18:00", "20:00", ServiceType.SIXTY),
        make_record("r2", "a", "2024-01-06", "19:00", "21:00", ServiceType.HUNDRED),
    ]


@pytest.fixture
def record():
    """Factory for OvertimeRecord with positional shorthand."""
    return make_record


@pytest.fixture
def employees_repo():
    """In-memory employee store factory: ``employees_repo([emp, ...])``."""
    return InMemoryEmployees


@pytest.fixture
def overtime_repo():
    """In-memory overtime store factory: ``overtime_repo([rec, ...])``."""
    return InMemoryOvertime
