"""
Dependency injection providers for FastAPI.

This module provides factory functions for creating repository and mapper instances,
following the Dependency Inversion Principle. Tests replace them through
app.dependency_overrides.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from mappers import EmployeeMapper, IEmployeeMapper
from repositories import EmployeeRepository, IEmployeeRepository

_employee_mapper = EmployeeMapper()


def get_employee_repository(db: AsyncSession = Depends(get_db)) -> IEmployeeRepository:
    """
    Factory function for creating EmployeeRepository instances.

    Args:
        db: Request-scoped database session (injected)

    Returns:
        IEmployeeRepository: Repository bound to the session
    """
    return EmployeeRepository(db)


def get_employee_mapper() -> IEmployeeMapper:
    """
    Factory function for the employee mapper.

    The mapper is stateless, so one instance is shared across requests.
    """
    return _employee_mapper
