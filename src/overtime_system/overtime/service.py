from __future__ import annotations

from typing import Sequence

from loguru import logger

from ..common.datetime_utils import parse_iso_date
from ..core.enums import ServiceType
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..payroll.intervals import hours_worked
from .model import OvertimeDraft, OvertimeRecord
from .repository import OvertimeRepository


class OvertimeService:
    """Use case: register, edit and remove overtime sessions."""

    def __init__(self, records: OvertimeRepository, employees: EmployeeRepository):
        self._records = records
        self._employees = employees

    def _build(
        self,
        *,
        employee_id: str,
        date: str,
        start_time: str,
        end_time: str,
        service_type: str,
        observation: str = "",
        require_active: bool,
    ) -> OvertimeDraft:
        employee = self._employees.get_by_id(employee_id) if employee_id else None
        if not employee or (require_active and not employee.is_active):
            raise ValidationError("Selecione um funcionário válido.")

        if not date:
            raise ValidationError("Data é obrigatória.")
        try:
            day = parse_iso_date(date)
        except ValueError:
            raise ValidationError(f"Data inválida: '{date}'.")

        # 0 hours is the calculator's sentinel for an invalid interval.
        if hours_worked(start_time, end_time) <= 0:
            raise ValidationError("Hora de fim deve ser maior que a de início.")

        try:
            st = ServiceType(service_type)
        except ValueError:
            raise ValidationError(f"Tipo de serviço inválido: '{service_type}'.")

        return OvertimeDraft(
            employee_id=employee.employee_id,
            date=day.strftime("%Y-%m-%d"),
            start_time=start_time.strip(),
            end_time=end_time.strip(),
            service_type=st,
            observation=(observation or "").strip().upper(),
        )

    def add(self, *, employee_id: str, date: str, start_time: str, end_time: str, service_type: str, observation: str = "") -> str:
        draft = self._build(
            employee_id=employee_id,
            date=date,
            start_time=start_time,
            end_time=end_time,
            service_type=service_type,
            observation=observation,
            require_active=True,
        )
        record_id = self._records.create(draft)
        logger.info(f"Hora extra registrada (id={record_id}, funcionário={draft.employee_id}, data={draft.date})")
        return record_id

    def update(self, record_id: str, *, employee_id: str, date: str, start_time: str, end_time: str, service_type: str, observation: str = "") -> None:
        if not self._records.get_by_id(record_id):
            raise NotFoundError("Registro não encontrado.")
        draft = self._build(
            employee_id=employee_id,
            date=date,
            start_time=start_time,
            end_time=end_time,
            service_type=service_type,
            observation=observation,
            require_active=False,
        )
        self._records.update(record_id, draft)

    def delete(self, record_id: str) -> None:
        if not self._records.delete(record_id):
            raise NotFoundError("Registro não encontrado.")
        logger.info(f"Hora extra removida (id={record_id})")

    def list_all(self) -> Sequence[OvertimeRecord]:
        return self._records.list_all()

    def import_batch(self, drafts: Sequence[OvertimeDraft]) -> list[str]:
        """Persist already validated rows sequentially; no ordering dependency between them."""
        ids = [self._records.create(d) for d in drafts]
        logger.info(f"{len(ids)} hora(s) extra(s) importada(s) em lote")
        return ids
