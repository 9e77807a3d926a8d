from __future__ import annotations

from typing import Sequence

from ..common.logger import get_logger
from .model import Employee, EmployeeLookup
from .repository import EmployeeRepository

logger = get_logger(__name__)


class EmployeeService:
    """Use case: manage employees. Every call goes straight to the repository."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def find_all(self) -> Sequence[Employee]:
        logger.debug("find_all")
        return self._employees.find_all()

    def find_by_id(self, employee_id: int) -> EmployeeLookup:
        logger.debug("find_by_id id=%s", employee_id)
        return self._employees.find_by_id(employee_id)

    def save(self, employee: Employee) -> Employee:
        logger.debug("save id=%s", employee.employee_id)
        return self._employees.save(employee)

    def delete(self, employee_id: int) -> None:
        logger.debug("delete id=%s", employee_id)
        self._employees.delete_by_id(employee_id)
