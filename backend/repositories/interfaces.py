"""
Repository Interfaces

Abstract base classes for the data access layer following Dependency Inversion Principle.
The API depends on these so that an in-memory fake can stand in for the database in tests.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from models import Employee


class IEmployeeRepository(ABC):
    """
    Interface for Employee persistence.

    All methods are coroutines. Lookups return None or an empty list for
    missing rows; storage failures raise DatabaseError.
    """

    @abstractmethod
    async def get_all(self) -> List[Employee]:
        """Return every employee (empty list when there are none)."""
        pass

    @abstractmethod
    async def get_by_id(self, id: int) -> Optional[Employee]:
        """Return the employee with this id, or None."""
        pass

    @abstractmethod
    async def insert(self, employee: Employee) -> Employee:
        """
        Insert a new employee.

        The generated identifier is written to employee.id.

        Raises:
            DatabaseError: If a constraint (required field, length, foreign key) is violated
        """
        pass

    @abstractmethod
    async def update(self, employee: Employee) -> bool:
        """
        Replace the mutable fields of the row matching employee.id.

        Returns:
            False when no row matches (nothing is written)
        """
        pass

    @abstractmethod
    async def delete(self, employee: Employee) -> None:
        """Remove the row matching employee.id."""
        pass

    @abstractmethod
    async def get_manager(self, employee: Employee) -> Optional[Employee]:
        """Resolve employee.manager_id, or None when the employee has no manager."""
        pass

    @abstractmethod
    async def get_direct_reports(self, manager_id: int) -> List[Employee]:
        """Return employees whose manager_id equals manager_id."""
        pass
