"""
Base repository providing common async CRUD operations.
"""

from contextlib import asynccontextmanager
from typing import Generic, TypeVar, List, Optional, Type

from sqlalchemy import select, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from exceptions import DatabaseError

T = TypeVar('T')

# Range of a 64-bit INTEGER primary key; larger ids cannot be bound and match no row
ID_MIN = -2**63
ID_MAX = 2**63 - 1


def _id_in_range(id: int) -> bool:
    return ID_MIN <= id <= ID_MAX


class BaseRepository(Generic[T]):
    """
    Generic base repository providing common CRUD operations.
    All specific repositories should inherit from this class.

    Write operations commit immediately; any SQLAlchemy failure rolls the
    session back and is re-raised as DatabaseError.
    """

    def __init__(self, db: AsyncSession, model: Type[T]):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy async session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    @asynccontextmanager
    async def _storage_errors(self, operation: str):
        try:
            yield
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise DatabaseError(operation, f"{operation} failed: {e}") from e

    async def create(self, obj: T) -> T:
        """
        Create a new record in the database.

        Args:
            obj: Model instance to create; its generated key is populated

        Returns:
            Created model instance
        """
        async with self._storage_errors(f"create {self.model.__name__}"):
            self.db.add(obj)
            await self.db.commit()
        return obj

    async def get_by_id(self, id: int) -> Optional[T]:
        """
        Retrieve a record by its ID.

        Args:
            id: Primary key value

        Returns:
            Model instance or None if not found
        """
        if not _id_in_range(id):
            return None
        async with self._storage_errors(f"get {self.model.__name__}"):
            return await self.db.get(self.model, id)

    async def get_all(self, limit: Optional[int] = None, offset: int = 0) -> List[T]:
        """
        Retrieve all records ordered by primary key.

        Args:
            limit: Maximum number of records to return
            offset: Number of records to skip

        Returns:
            List of model instances
        """
        query = select(self.model).order_by(self.model.id)
        if limit:
            query = query.limit(limit)
        if offset:
            query = query.offset(offset)
        async with self._storage_errors(f"list {self.model.__name__}"):
            result = await self.db.execute(query)
            return list(result.scalars().all())

    async def delete(self, obj: T) -> None:
        """
        Delete a record from the database.

        Args:
            obj: Model instance to delete
        """
        async with self._storage_errors(f"delete {self.model.__name__}"):
            await self.db.delete(obj)
            await self.db.commit()

    async def count(self) -> int:
        """Count total records."""
        async with self._storage_errors(f"count {self.model.__name__}"):
            result = await self.db.execute(select(func.count()).select_from(self.model))
            return result.scalar_one()

    async def exists(self, id: int) -> bool:
        """Check if a record exists by ID."""
        if not _id_in_range(id):
            return False
        query = select(self.model.id).where(self.model.id == id).limit(1)
        async with self._storage_errors(f"check {self.model.__name__}"):
            result = await self.db.execute(query)
            return result.scalar_one_or_none() is not None
