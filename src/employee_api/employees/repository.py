from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee, EmployeeLookup


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    The service layer depends on this interface, never on a concrete database.
    """

    def find_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def find_by_id(self, employee_id: int) -> EmployeeLookup:
        raise NotImplementedError

    def save(self, employee: Employee) -> Employee:
        """Insert when ``employee.employee_id`` is None, otherwise upsert by id."""
        raise NotImplementedError

    def delete_by_id(self, employee_id: int) -> None:
        raise NotImplementedError
