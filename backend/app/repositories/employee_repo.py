"""Employee repository: storage contract and its SQLAlchemy implementation."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from sqlalchemy import delete, select, text
from sqlalchemy.orm import Session

from app.models import Employee
from app.repositories.queries import SQL_EMPLOYEE_BY_NAMES

# Drivers bind integers as signed 64-bit; ids outside this range cannot exist
ID_RANGE = range(-(2**63), 2**63)


class EmployeeRepository(ABC):
    """CRUD and lookups over persisted employees.

    Lookup misses return None; storage errors propagate to the caller.
    """

    @abstractmethod
    def save(self, employee: Employee) -> Employee:
        """Insert when ``employee.id`` is None (assigning an id), else overwrite that row."""

    def save_all(self, employees: Iterable[Employee]) -> list[Employee]:
        return [self.save(e) for e in employees]

    @abstractmethod
    def find_all(self) -> list[Employee]:
        pass

    @abstractmethod
    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[Employee]:
        pass

    @abstractmethod
    def find_by_names(self, first_name: str, last_name: str) -> Optional[Employee]:
        """The single employee with this name pair; raises MultipleResultsFound on ambiguity."""

    @abstractmethod
    def delete_by_id(self, employee_id: int) -> None:
        """Remove the row if present; a missing id is a no-op."""

    @abstractmethod
    def delete_all(self) -> None:
        pass


class SqlEmployeeRepository(EmployeeRepository):
    """
    ORM-backed repository bound to one session.
    Writes are flushed, not committed; get_db() owns the transaction.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def save(self, employee: Employee) -> Employee:
        if employee.id is None:
            self.db.add(employee)
            persisted = employee
        else:
            persisted = self.db.merge(employee)
        self.db.flush()
        return persisted

    def find_all(self) -> list[Employee]:
        return list(self.db.scalars(select(Employee).order_by(Employee.id)))

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        if employee_id not in ID_RANGE:
            return None
        return self.db.get(Employee, employee_id)

    def find_by_email(self, email: str) -> Optional[Employee]:
        return self.db.scalars(
            select(Employee).where(Employee.email == email).order_by(Employee.id)
        ).first()

    def find_by_names(self, first_name: str, last_name: str) -> Optional[Employee]:
        stmt = select(Employee).from_statement(text(SQL_EMPLOYEE_BY_NAMES))
        return self.db.scalars(
            stmt,
            {"first_name": first_name, "last_name": last_name},
        ).one_or_none()

    def delete_by_id(self, employee_id: int) -> None:
        employee = self.find_by_id(employee_id)
        if employee is not None:
            self.db.delete(employee)
            self.db.flush()

    def delete_all(self) -> None:
        self.db.execute(delete(Employee))
        self.db.flush()
