from __future__ import annotations

from typing import Any, Dict, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import NOT_FOUND, Employee, EmployeeLookup, Found
from .repository import EmployeeRepository


def _row_to_employee(row: Dict[str, Any]) -> Employee:
    return Employee(
        employee_id=int(row["id"]),
        first_name=row.get("first_name"),
        last_name=row.get("last_name"),
        email=row.get("email"),
        role=row.get("role"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, first_name, last_name, email, role
                FROM employees
                ORDER BY id
                """
            )
            return [_row_to_employee(r) for r in fetchall(cur)]

    def find_by_id(self, employee_id: int) -> EmployeeLookup:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, first_name, last_name, email, role
                FROM employees
                WHERE id=%s
                """,
                (employee_id,),
            )
            row = fetchone(cur)
            if not row:
                return NOT_FOUND
            return Found(_row_to_employee(row))

    def save(self, employee: Employee) -> Employee:
        with db_cursor(self._conn_factory) as (_, cur):
            if employee.employee_id is None:
                cur.execute(
                    """
                    INSERT INTO employees(first_name, last_name, email, role)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (employee.first_name, employee.last_name, employee.email, employee.role),
                )
                return employee.with_id(int(cur.lastrowid))

            cur.execute(
                """
                INSERT INTO employees(id, first_name, last_name, email, role)
                VALUES(%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    first_name=VALUES(first_name),
                    last_name=VALUES(last_name),
                    email=VALUES(email),
                    role=VALUES(role)
                """,
                (employee.employee_id, employee.first_name, employee.last_name, employee.email, employee.role),
            )
            return employee

    def delete_by_id(self, employee_id: int) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE id=%s", (employee_id,))
