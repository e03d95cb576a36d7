"""SQLAlchemy models only; no business logic."""
from app.models.employee import Employee

__all__ = [
    "Employee",
]
