"""JSON shapes for the employee endpoints (camelCase on the wire)."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EmployeeBase(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    first_name: str
    last_name: str
    email: str


class EmployeeIn(EmployeeBase):
    """Create/update body. A client-sent id is accepted and ignored."""

    id: Optional[int] = None


class EmployeeRead(EmployeeBase):
    id: Optional[int] = None
