"""Spreadsheet export of already computed rows.

Monetary columns are masked after computation when confidential mode is on;
nothing here recalculates values.
"""
from __future__ import annotations

import csv
import io
from datetime import date
from typing import Iterable, Sequence

import pandas as pd

from ..common.datetime_utils import as_calendar_date
from ..core.constants import CONFIDENTIAL_MASK, MONTHLY_HOURS_DIVISOR
from ..core.enums import ServiceType
from ..employees.model import Employee
from ..payroll.model import OvertimeRow, ReceiptSummary
from ..payroll.valuation import hourly_rate, rate_for

CURRENCY_FORMAT = '"R$" #,##0.00'

OVERTIME_COLUMNS = ["Funcionário", "Data", "Início", "Fim", "Horas", "Tipo", "Observação", "Valor Total (R$)"]
EMPLOYEE_COLUMNS = [
    "Código",
    "Nome",
    "Status",
    "Salário Base (R$)",
    "Hora Mensal",
    "Valor por Hora (R$)",
    "Valor Hora 60% (R$)",
    "Valor Hora 100% (R$)",
]
RECEIPT_COLUMNS = ["Código", "Funcionário", "Total Horas", "Valor Total (R$)", "Última Data"]


def _money(value: float, confidential: bool):
    return CONFIDENTIAL_MASK if confidential else round(value, 2)


def overtime_frame(rows: Iterable[OvertimeRow], *, confidential: bool = False) -> pd.DataFrame:
    data = [
        {
            "Funcionário": row.employee_name,
            "Data": as_calendar_date(row.record.date),
            "Início": row.record.start_time,
            "Fim": row.record.end_time,
            "Horas": round(row.hours, 2),
            "Tipo": ServiceType(row.record.service_type).value,
            "Observação": row.record.observation,
            "Valor Total (R$)": _money(row.value, confidential),
        }
        for row in rows
    ]
    return pd.DataFrame(data, columns=OVERTIME_COLUMNS)


def employees_frame(employees: Iterable[Employee], *, confidential: bool = False) -> pd.DataFrame:
    data = []
    for e in employees:
        data.append(
            {
                "Código": e.code,
                "Nome": e.name,
                "Status": "Ativo" if e.is_active else "Inativo",
                "Salário Base (R$)": _money(e.base_salary, confidential),
                "Hora Mensal": MONTHLY_HOURS_DIVISOR,
                "Valor por Hora (R$)": _money(hourly_rate(e.base_salary), confidential),
                "Valor Hora 60% (R$)": _money(rate_for(e.base_salary, ServiceType.SIXTY), confidential),
                "Valor Hora 100% (R$)": _money(rate_for(e.base_salary, ServiceType.HUNDRED), confidential),
            }
        )
    return pd.DataFrame(data, columns=EMPLOYEE_COLUMNS)


def receipts_frame(summaries: Iterable[ReceiptSummary], *, confidential: bool = False) -> pd.DataFrame:
    data = [
        {
            "Código": s.employee_code,
            "Funcionário": s.employee_name,
            "Total Horas": round(s.total_hours, 2),
            "Valor Total (R$)": _money(s.total_value, confidential),
            "Última Data": s.last_date,
        }
        for s in summaries
    ]
    return pd.DataFrame(data, columns=RECEIPT_COLUMNS)


def to_xlsx(df: pd.DataFrame, *, sheet_name: str, currency_columns: Sequence[str] = ()) -> io.BytesIO:
    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)
        ws = writer.sheets[sheet_name]
        for col_idx, name in enumerate(df.columns, start=1):
            width = max([len(str(name))] + [len(str(v)) for v in df[name].tolist()]) + 2
            ws.column_dimensions[ws.cell(row=1, column=col_idx).column_letter].width = width
            if name in currency_columns:
                for cell in ws.iter_rows(min_row=2, min_col=col_idx, max_col=col_idx):
                    cell[0].number_format = CURRENCY_FORMAT
    out.seek(0)
    return out


def to_csv_bytes(df: pd.DataFrame) -> bytes:
    """CSV with BOM so spreadsheet apps pick up UTF-8."""
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=list(df.columns))
    writer.writeheader()
    for row in df.to_dict(orient="records"):
        writer.writerow({k: v.strftime("%Y-%m-%d") if isinstance(v, date) else v for k, v in row.items()})
    return buf.getvalue().encode("utf-8-sig")


def export_filename(prefix: str, *, today: date, extension: str) -> str:
    return f"{prefix}_{today.strftime('%Y-%m-%d')}.{extension}"
