"""Thin API layer: employee CRUD."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from app.db.session import get_session
from app.models import Employee
from app.repositories import SqlEmployeeRepository
from app.schemas.employee import EmployeeIn, EmployeeRead
from app.services.employee_service import DuplicateEmail, EmployeeService

router = APIRouter(prefix="/api/employees", tags=["employees"])

DELETED_MESSAGE = "Employee deleted successfully!."


def get_employee_service(db: Session = Depends(get_session)) -> EmployeeService:
    return EmployeeService(SqlEmployeeRepository(db))


@router.post("", response_model=EmployeeRead, status_code=status.HTTP_201_CREATED)
def create_employee(
    body: EmployeeIn,
    service: EmployeeService = Depends(get_employee_service),
):
    """Create an employee; 409 if the email is already taken."""
    result = service.save_employee(
        Employee(first_name=body.first_name, last_name=body.last_name, email=body.email)
    )
    if isinstance(result, DuplicateEmail):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=result.message)
    return EmployeeRead.model_validate(result)


@router.get("", response_model=list[EmployeeRead])
def list_employees(service: EmployeeService = Depends(get_employee_service)):
    return [EmployeeRead.model_validate(e) for e in service.get_all_employees()]


@router.get("/{employee_id}", response_model=EmployeeRead)
def get_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
):
    """Fetch one employee; 404 with an empty body if absent."""
    employee = service.get_employee_by_id(employee_id)
    if employee is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return EmployeeRead.model_validate(employee)


@router.put("/{employee_id}", response_model=EmployeeRead)
def update_employee(
    employee_id: int,
    body: EmployeeIn,
    service: EmployeeService = Depends(get_employee_service),
):
    """
    Copy name and email from the body onto the stored record and save it.
    The body's id, if any, is ignored; the path id wins.
    """
    employee = service.get_employee_by_id(employee_id)
    if employee is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    employee.first_name = body.first_name
    employee.last_name = body.last_name
    employee.email = body.email
    return EmployeeRead.model_validate(service.update_employee(employee))


@router.delete("/{employee_id}", response_class=PlainTextResponse)
def delete_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
):
    """Delete is idempotent; a missing id still answers 200."""
    service.delete_employee(employee_id)
    return PlainTextResponse(DELETED_MESSAGE)
