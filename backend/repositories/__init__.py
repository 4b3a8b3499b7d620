"""
Repository layer for data access abstraction.

This package contains repository classes that encapsulate database queries
and provide a clean interface for data access operations.
"""

from .base_repository import BaseRepository
from .interfaces import IEmployeeRepository
from .employee_repository import EmployeeRepository

__all__ = [
    "BaseRepository",
    "IEmployeeRepository",
    "EmployeeRepository",
]
