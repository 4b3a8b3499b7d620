"""
Employee DTOs

Wire shape for employee records. Field names are camelCase on the wire
(firstName, middleName, lastName) and snake_case in Python.
"""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import Optional

from constants import EmployeeLimits


class EmployeeDto(BaseModel):
    """
    Transport projection of an Employee.

    Salary and manager are intentionally absent. An id of 0 means
    "not assigned yet" and is what clients send when creating a record.
    """

    id: int = Field(0, ge=0, description="Employee ID (0 when not yet assigned)")
    first_name: str = Field(
        min_length=1,
        max_length=EmployeeLimits.NAME_MAX_LENGTH,
        description="First name",
    )
    middle_name: Optional[str] = Field(
        None,
        max_length=EmployeeLimits.NAME_MAX_LENGTH,
        description="Middle name",
    )
    last_name: str = Field(
        min_length=1,
        max_length=EmployeeLimits.NAME_MAX_LENGTH,
        description="Last name",
    )

    class Config:
        """Pydantic configuration."""
        alias_generator = to_camel
        populate_by_name = True  # Accept first_name as well as firstName
        from_attributes = True  # Allow creation from ORM models
        json_schema_extra = {
            "example": {
                "id": 1,
                "firstName": "Mahmoud",
                "middleName": "Ali",
                "lastName": "Elgendi"
            }
        }
