"""
Mappers between persistence entities and transport DTOs.
"""

from .interfaces import IEmployeeMapper
from .employee_mapper import EmployeeMapper

__all__ = [
    "IEmployeeMapper",
    "EmployeeMapper",
]
