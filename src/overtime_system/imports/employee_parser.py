"""Parse pasted spreadsheet rows ``code<TAB>name<TAB>salary`` into employees."""
from __future__ import annotations

from typing import Iterable

from ..common.validators import parse_brl_amount
from ..core.enums import RowStatus
from ..employees.model import Employee, EmployeeDraft
from .model import ParsedRow, invalid, split_lines


def parse_employee_batch(text: str, existing: Iterable[Employee]) -> list[ParsedRow[EmployeeDraft]]:
    existing_codes = {e.code.upper() for e in existing}
    seen_in_batch: set[str] = set()

    rows: list[ParsedRow[EmployeeDraft]] = []
    for line in split_lines(text):
        columns = line.split("\t")
        if len(columns) < 3:
            rows.append(invalid(line, "Número insuficiente de colunas. Esperado: 3."))
            continue

        code, name, salary_text = (c.strip() for c in columns[:3])
        upper_code = code.upper()

        if not code:
            rows.append(invalid(line, "Código não pode estar em branco."))
            continue
        if upper_code in existing_codes or upper_code in seen_in_batch:
            rows.append(invalid(line, f"Código '{code}' já existe."))
            continue
        # Reserved even if a later column fails, like the preview table shows it.
        seen_in_batch.add(upper_code)

        if not name:
            rows.append(invalid(line, "Nome não pode estar em branco."))
            continue

        salary = parse_brl_amount(salary_text)
        if salary is None or salary <= 0:
            rows.append(invalid(line, f"Salário inválido: '{salary_text}'. Deve ser um número positivo."))
            continue

        rows.append(
            ParsedRow(
                status=RowStatus.VALID,
                original_line=line,
                data=EmployeeDraft(code=upper_code, name=name.upper(), base_salary=salary),
            )
        )
    return rows
