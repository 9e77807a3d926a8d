from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository

    employee_service: EmployeeService


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    employee_service = EmployeeService(employees_repo)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        employee_service=employee_service,
    )


def build_container_for(employees_repo: EmployeeRepository) -> Container:
    """Wire the service over an already-built repository (tests, scripts)."""
    return Container(
        conn=None,
        employees_repo=employees_repo,
        employee_service=EmployeeService(employees_repo),
    )
