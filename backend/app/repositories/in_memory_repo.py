"""Dict-backed employee repository for tests and local runs without a database."""
from __future__ import annotations

from typing import Optional

from sqlalchemy.exc import MultipleResultsFound

from app.models import Employee
from app.repositories.employee_repo import EmployeeRepository


def _copy(employee: Employee) -> Employee:
    return Employee(
        id=employee.id,
        first_name=employee.first_name,
        last_name=employee.last_name,
        email=employee.email,
    )


class InMemoryEmployeeRepository(EmployeeRepository):
    """
    Same contract as SqlEmployeeRepository, keyed by id.
    Rows are stored and returned as copies, so callers never share state with the store.
    """

    def __init__(self) -> None:
        self._rows: dict[int, Employee] = {}
        self._next_id = 1

    def save(self, employee: Employee) -> Employee:
        if employee.id is None:
            employee.id = self._next_id
        self._next_id = max(self._next_id, employee.id + 1)
        self._rows[employee.id] = _copy(employee)
        return _copy(employee)

    def find_all(self) -> list[Employee]:
        return [_copy(self._rows[k]) for k in sorted(self._rows)]

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        row = self._rows.get(employee_id)
        return _copy(row) if row is not None else None

    def find_by_email(self, email: str) -> Optional[Employee]:
        for key in sorted(self._rows):
            if self._rows[key].email == email:
                return _copy(self._rows[key])
        return None

    def find_by_names(self, first_name: str, last_name: str) -> Optional[Employee]:
        matches = [
            row
            for row in self._rows.values()
            if row.first_name == first_name and row.last_name == last_name
        ]
        if len(matches) > 1:
            raise MultipleResultsFound(
                f"Multiple employees named {first_name} {last_name}"
            )
        return _copy(matches[0]) if matches else None

    def delete_by_id(self, employee_id: int) -> None:
        self._rows.pop(employee_id, None)

    def delete_all(self) -> None:
        self._rows.clear()
