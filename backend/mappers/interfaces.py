"""
Mapper Interfaces

Abstract base classes for entity/DTO mappers following Dependency Inversion Principle.
Controllers depend on these, so tests can substitute a fake mapper.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List

from dtos.employee_dto import EmployeeDto
from models import Employee


class IEmployeeMapper(ABC):
    """
    Interface for converting between Employee entities and EmployeeDto.

    Implementations must be pure: no I/O, no mutation of their inputs.
    """

    @abstractmethod
    def to_dto(self, entity: Employee) -> EmployeeDto:
        """
        Project an entity onto the wire shape.

        Args:
            entity: Persisted employee

        Returns:
            EmployeeDto without salary or manager information
        """
        pass

    @abstractmethod
    def to_dto_list(self, entities: Iterable[Employee]) -> List[EmployeeDto]:
        """
        Project a sequence of entities, preserving count and order.

        Args:
            entities: Persisted employees

        Returns:
            List of EmployeeDto
        """
        pass

    @abstractmethod
    def to_entity(self, dto: EmployeeDto) -> Employee:
        """
        Build a transient entity from a DTO.

        Args:
            dto: Incoming employee payload

        Returns:
            Employee with salary and manager_id left unset
        """
        pass
