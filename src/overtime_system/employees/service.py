from __future__ import annotations

from typing import Sequence

from loguru import logger

from ..common.validators import require_non_empty, require_positive
from ..core.enums import EmployeeStatusFilter
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee, EmployeeDraft
from .repository import EmployeeRepository


class EmployeeService:
    """Use case: manage the employee roster."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def _clean(self, *, code: str, name: str, base_salary) -> EmployeeDraft:
        code = require_non_empty(code, "Código").upper()
        name = require_non_empty(name, "Nome").upper()
        salary = require_positive(base_salary, "Salário")
        return EmployeeDraft(code=code, name=name, base_salary=salary)

    def _ensure_code_free(self, code: str, *, except_id: str | None = None) -> None:
        existing = self._employees.get_by_code(code)
        if existing and existing.employee_id != except_id:
            raise ValidationError(f"Código '{code}' já existe.")

    def create(self, *, code: str, name: str, base_salary) -> str:
        draft = self._clean(code=code, name=name, base_salary=base_salary)
        self._ensure_code_free(draft.code)
        employee_id = self._employees.create(draft)
        logger.info(f"Funcionário {draft.code} cadastrado (id={employee_id})")
        return employee_id

    def update(self, employee_id: str, *, code: str, name: str, base_salary) -> None:
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Funcionário não encontrado.")
        draft = self._clean(code=code, name=name, base_salary=base_salary)
        self._ensure_code_free(draft.code, except_id=employee_id)
        self._employees.update(
            employee_id, code=draft.code, name=draft.name, base_salary=draft.base_salary
        )

    def toggle_active(self, employee_id: str) -> bool:
        """Flip the active flag; returns the new value."""
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Funcionário não encontrado.")
        new_value = not employee.is_active
        self._employees.set_active(employee_id, is_active=new_value)
        logger.info(f"Funcionário {employee.code} {'ativado' if new_value else 'inativado'}")
        return new_value

    def list_all(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def list_by_status(self, status: EmployeeStatusFilter | str = EmployeeStatusFilter.ACTIVE) -> list[Employee]:
        status = EmployeeStatusFilter(status)
        items = [
            e
            for e in self._employees.list_all()
            if status == EmployeeStatusFilter.ALL or e.is_active == (status == EmployeeStatusFilter.ACTIVE)
        ]
        items.sort(key=lambda e: e.code)
        return items

    def import_batch(self, drafts: Sequence[EmployeeDraft]) -> list[str]:
        """Persist already validated rows one after another; every row is independent."""
        ids = [self._employees.create(d) for d in drafts]
        logger.info(f"{len(ids)} funcionário(s) importado(s) em lote")
        return ids
