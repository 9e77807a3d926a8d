from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional, Union


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Plain data object (no DB access). ``employee_id`` is None until the store
    assigns one on insert and never changes afterwards.
    """

    employee_id: Optional[int]
    first_name: Optional[str]
    last_name: Optional[str]
    email: Optional[str]
    role: Optional[str]

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> "Employee":
        raw_id = payload.get("id")
        return cls(
            employee_id=int(raw_id) if raw_id is not None else None,
            first_name=payload.get("firstName"),
            last_name=payload.get("lastName"),
            email=payload.get("email"),
            role=payload.get("role"),
        )

    def to_json(self) -> dict:
        return {
            "id": self.employee_id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "role": self.role,
        }

    def with_id(self, employee_id: Optional[int]) -> "Employee":
        return replace(self, employee_id=employee_id)

    def with_fields(self, incoming: "Employee") -> "Employee":
        """Copy of self with the four mutable fields taken from ``incoming``; id is kept."""
        return replace(
            self,
            first_name=incoming.first_name,
            last_name=incoming.last_name,
            email=incoming.email,
            role=incoming.role,
        )


@dataclass(frozen=True)
class Found:
    employee: Employee

    def __bool__(self) -> bool:
        return True


class NotFound:
    _instance: Optional["NotFound"] = None

    def __new__(cls) -> "NotFound":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = NotFound()

EmployeeLookup = Union[Found, NotFound]
