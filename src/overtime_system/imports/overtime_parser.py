"""Parse pasted overtime rows.

Columns: employee name | date (DD/MM/YYYY) | start (HH:MM:SS) | end (HH:MM:SS)
| type (60 or 100) | observation (optional).
"""
from __future__ import annotations

import re
from typing import Iterable, Optional

from ..common.datetime_utils import parse_br_date
from ..core.enums import RowStatus, ServiceType
from ..employees.model import Employee
from ..overtime.model import OvertimeDraft
from ..payroll.intervals import hours_worked
from .model import ParsedRow, invalid, split_lines

_TIME_RE = re.compile(r"^([01]\d|2[0-3]):([0-5]\d):([0-5]\d)$")
_DATE_RE = re.compile(r"^\d{1,2}/\d{1,2}/\d{1,4}$")

_SERVICE_TOKENS = {
    "60": ServiceType.SIXTY,
    "60%": ServiceType.SIXTY,
    "100": ServiceType.HUNDRED,
    "100%": ServiceType.HUNDRED,
}


def parse_service_type(token: str) -> Optional[ServiceType]:
    return _SERVICE_TOKENS.get((token or "").strip())


def parse_overtime_batch(text: str, employees: Iterable[Employee]) -> list[ParsedRow[OvertimeDraft]]:
    active_by_name = {}
    for e in employees:
        if e.is_active:
            active_by_name.setdefault(e.name.upper(), e)

    rows: list[ParsedRow[OvertimeDraft]] = []
    for line in split_lines(text):
        columns = [c.strip() for c in line.split("\t")]
        if len(columns) < 5:
            rows.append(invalid(line, "Número insuficiente de colunas. Esperado: 6."))
            continue

        name, date_text, start_full, end_full, type_text = columns[:5]
        observation = columns[5] if len(columns) > 5 else ""

        employee = active_by_name.get(name.upper())
        if not employee:
            rows.append(invalid(line, f"Funcionário '{name}' não encontrado ou inativo."))
            continue

        if not _DATE_RE.match(date_text):
            rows.append(invalid(line, f"Formato de data inválido: '{date_text}'. Use DD/MM/AAAA."))
            continue
        try:
            day = parse_br_date(date_text)
        except ValueError:
            rows.append(invalid(line, f"Data inválida: '{date_text}'."))
            continue

        if not _TIME_RE.match(start_full) or not _TIME_RE.match(end_full):
            rows.append(
                invalid(line, f"Formato de hora inválido: '{start_full}' ou '{end_full}'. Use HH:MM:SS.")
            )
            continue
        if hours_worked(start_full, end_full) <= 0:
            rows.append(invalid(line, "A hora final deve ser maior que a inicial."))
            continue

        service_type = parse_service_type(type_text)
        if service_type is None:
            rows.append(invalid(line, f"Tipo de serviço inválido: '{type_text}'. Use '60' ou '100'."))
            continue

        rows.append(
            ParsedRow(
                status=RowStatus.VALID,
                original_line=line,
                employee_name=employee.name,
                data=OvertimeDraft(
                    employee_id=employee.employee_id,
                    date=day.strftime("%Y-%m-%d"),
                    start_time=start_full[:5],
                    end_time=end_full[:5],
                    service_type=service_type,
                    observation=observation.upper(),
                ),
            )
        )
    return rows
