"""
Employee service: the create-time unique-email rule on top of the repository.
Everything else passes straight through to storage.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from app.models import Employee
from app.repositories.employee_repo import EmployeeRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DuplicateEmail:
    """Create rejected: another employee already uses ``email``."""

    email: str

    @property
    def message(self) -> str:
        return f"Employee already exist with given email: {self.email}"


SaveResult = Union[Employee, DuplicateEmail]


class EmployeeService:
    def __init__(self, repository: EmployeeRepository) -> None:
        self.repository = repository

    def save_employee(self, employee: Employee) -> SaveResult:
        """
        Persist a new employee unless its email is taken.
        The lookup and the insert are separate statements; concurrent creates
        with the same email are not serialized.
        """
        if self.repository.find_by_email(employee.email) is not None:
            logger.warning("Rejected employee create: email %s already exists", employee.email)
            return DuplicateEmail(employee.email)
        saved = self.repository.save(employee)
        logger.info("Created employee %s", saved.id)
        return saved

    def get_all_employees(self) -> list[Employee]:
        return self.repository.find_all()

    def get_employee_by_id(self, employee_id: int) -> Optional[Employee]:
        return self.repository.find_by_id(employee_id)

    def update_employee(self, employee: Employee) -> Employee:
        updated = self.repository.save(employee)
        logger.info("Updated employee %s", updated.id)
        return updated

    def delete_employee(self, employee_id: int) -> None:
        self.repository.delete_by_id(employee_id)
        logger.info("Deleted employee %s", employee_id)
