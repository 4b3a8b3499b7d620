"""
Data Transfer Objects (DTOs) Layer

This package contains DTOs that decouple the API layer from the database models.
DTOs prevent leaking database structure (salary, manager links) to external APIs
and allow independent evolution.
"""

from .employee_dto import EmployeeDto

__all__ = ["EmployeeDto"]
