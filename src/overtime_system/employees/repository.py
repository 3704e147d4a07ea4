from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee, EmployeeDraft


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): the service layer depends on this interface, never on a concrete store.
    """

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_code(self, code: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        """All employees ordered by name."""
        raise NotImplementedError

    def create(self, draft: EmployeeDraft, *, is_active: bool = True) -> str:
        raise NotImplementedError

    def update(self, employee_id: str, *, code: str, name: str, base_salary: float) -> bool:
        raise NotImplementedError

    def set_active(self, employee_id: str, *, is_active: bool) -> bool:
        raise NotImplementedError
