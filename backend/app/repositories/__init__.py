from app.repositories.employee_repo import EmployeeRepository, SqlEmployeeRepository
from app.repositories.in_memory_repo import InMemoryEmployeeRepository

__all__ = [
    "EmployeeRepository",
    "InMemoryEmployeeRepository",
    "SqlEmployeeRepository",
]
