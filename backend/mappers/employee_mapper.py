"""
Employee mapper converting between the ORM entity and the wire DTO.
"""

from typing import Iterable, List

from dtos.employee_dto import EmployeeDto
from models import Employee
from .interfaces import IEmployeeMapper


class EmployeeMapper(IEmployeeMapper):
    """Structural Employee <-> EmployeeDto converter."""

    def to_dto(self, entity: Employee) -> EmployeeDto:
        return EmployeeDto(
            id=entity.id or 0,
            first_name=entity.first_name,
            middle_name=entity.middle_name,
            last_name=entity.last_name,
        )

    def to_dto_list(self, entities: Iterable[Employee]) -> List[EmployeeDto]:
        return [self.to_dto(entity) for entity in entities]

    def to_entity(self, dto: EmployeeDto) -> Employee:
        # id 0 is "unassigned": leave it None so storage generates one on insert.
        # salary and manager_id are not carried by the DTO and stay None.
        return Employee(
            id=dto.id or None,
            first_name=dto.first_name,
            middle_name=dto.middle_name,
            last_name=dto.last_name,
        )
