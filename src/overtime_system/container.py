from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.constants import DEFAULT_TOP_N
from .database.connection import DatabaseConnection, DBConfig
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .overtime.mysql_overtime_repository import MySQLOvertimeRepository
from .overtime.repository import OvertimeRepository
from .overtime.service import OvertimeService
from .payroll.model import Snapshot
from .payroll.service import PayrollReportService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    overtime_repo: OvertimeRepository

    employee_service: EmployeeService
    overtime_service: OvertimeService
    payroll_report_service: PayrollReportService

    conn: Optional[DatabaseConnection] = None

    def snapshot(self) -> Snapshot:
        """Fresh read of the store; the payroll core is re-run on every snapshot."""
        return Snapshot(
            employees=tuple(self.employees_repo.list_all()),
            records=tuple(self.overtime_repo.list_all()),
        )


def assemble(
    employees_repo: EmployeeRepository,
    overtime_repo: OvertimeRepository,
    *,
    conn: Optional[DatabaseConnection] = None,
    top_n: int = DEFAULT_TOP_N,
) -> Container:
    return Container(
        employees_repo=employees_repo,
        overtime_repo=overtime_repo,
        employee_service=EmployeeService(employees_repo),
        overtime_service=OvertimeService(overtime_repo, employees_repo),
        payroll_report_service=PayrollReportService(top_n=top_n),
        conn=conn,
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return assemble(
        MySQLEmployeeRepository(conn),
        MySQLOvertimeRepository(conn),
        conn=conn,
    )
