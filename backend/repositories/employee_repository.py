"""
Employee repository for employee-specific data access operations.
"""

from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from models import Employee
from utils.logging_utils import StructuredLogger, log_operation
from .base_repository import BaseRepository, _id_in_range
from .interfaces import IEmployeeRepository

logger = StructuredLogger(__name__)


class EmployeeRepository(BaseRepository[Employee], IEmployeeRepository):
    """Repository for Employee model operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Employee)

    @log_operation("list_employees")
    async def get_all(self) -> List[Employee]:
        return await super().get_all()

    @log_operation("get_employee")
    async def get_by_id(self, id: int) -> Optional[Employee]:
        return await super().get_by_id(id)

    @log_operation("insert_employee")
    async def insert(self, employee: Employee) -> Employee:
        """
        Insert a new employee and populate its generated id.

        Args:
            employee: Transient employee (id None or explicit)

        Returns:
            The same instance, now persistent
        """
        await self.create(employee)
        logger.info("Employee inserted", extra={"employee_id": employee.id})
        return employee

    @log_operation("update_employee")
    async def update(self, employee: Employee) -> bool:
        """
        Replace first, middle and last name of the row matching employee.id.

        salary and manager_id are only written when the entity carries a
        value for them; a None leaves the stored value in place.

        Args:
            employee: Entity holding the new values (need not be attached)

        Returns:
            True if a row was updated, False if no row has that id
        """
        values = {
            "first_name": employee.first_name,
            "middle_name": employee.middle_name,
            "last_name": employee.last_name,
        }
        if employee.salary is not None:
            values["salary"] = employee.salary
        if employee.manager_id is not None:
            values["manager_id"] = employee.manager_id

        if employee.id is None or not _id_in_range(employee.id):
            logger.warning("Update matched no employee", extra={"employee_id": employee.id})
            return False

        stmt = update(Employee).where(Employee.id == employee.id).values(**values)
        async with self._storage_errors("update Employee"):
            result = await self.db.execute(stmt)
            await self.db.commit()

        if result.rowcount == 0:
            logger.warning("Update matched no employee", extra={"employee_id": employee.id})
            return False
        return True

    @log_operation("delete_employee")
    async def delete(self, employee: Employee) -> None:
        # Direct reports keep existing; the foreign key sets their manager_id to NULL
        await super().delete(employee)

    async def get_manager(self, employee: Employee) -> Optional[Employee]:
        """
        Look up an employee's manager by manager_id.

        Returns:
            Manager instance, or None if manager_id is unset
        """
        if employee.manager_id is None:
            return None
        return await super().get_by_id(employee.manager_id)

    async def get_direct_reports(self, manager_id: int) -> List[Employee]:
        """
        Get employees reporting directly to a manager.

        Args:
            manager_id: Manager's employee id

        Returns:
            Direct reports ordered by id
        """
        query = select(Employee).where(Employee.manager_id == manager_id).order_by(Employee.id)
        async with self._storage_errors("list direct reports"):
            result = await self.db.execute(query)
            return list(result.scalars().all())
