from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from ..core.enums import ServiceType
from ..employees.model import Employee
from ..overtime.model import OvertimeRecord


@dataclass(frozen=True)
class Snapshot:
    """Read-only copy of the store contents a recomputation runs against."""

    employees: Sequence[Employee] = ()
    records: Sequence[OvertimeRecord] = ()


@dataclass(frozen=True)
class ReceiptSummary:
    """Per-employee totals over a filtered period (payment receipt line)."""

    employee_id: str
    employee_code: str
    employee_name: str
    total_hours: float
    total_value: float
    last_date: str


@dataclass(frozen=True)
class DailyHours:
    date: str
    hours: float


@dataclass(frozen=True)
class ServiceTypeHours:
    service_type: ServiceType
    hours: float


@dataclass(frozen=True)
class RankedEmployee:
    employee_id: str
    name: str
    hours: float


@dataclass(frozen=True)
class OvertimeRow:
    """Read-model for the overtime listing/export."""

    record: OvertimeRecord
    employee_name: str
    hours: float
    value: float


@dataclass(frozen=True)
class DashboardData:
    active_employees: int
    total_hours: float
    total_value: float
    daily: list[DailyHours] = field(default_factory=list)
    top_employees: list[RankedEmployee] = field(default_factory=list)
    service_types: list[ServiceTypeHours] = field(default_factory=list)
    selected_employee_id: Optional[str] = None
