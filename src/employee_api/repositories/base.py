"""Base repository with common database operations."""

from typing import Any, Generic, TypeVar

from sqlalchemy import exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.models.orm.base import Base

T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    """Base repository with common CRUD operations."""

    model: type[T]

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session."""
        self.session = session

    async def find_by_id(self, id: Any) -> T | None:
        """Get a record by primary key.

        Args:
            id: Record identifier

        Returns:
            Record or None if not found
        """
        result = await self.session.execute(
            select(self.model).where(self.model.id == id)
        )
        return result.scalar_one_or_none()

    async def exists_by_id(self, id: Any) -> bool:
        """Check whether a record with the given primary key exists.

        Args:
            id: Record identifier

        Returns:
            True if a record exists
        """
        result = await self.session.execute(
            select(exists().where(self.model.id == id))
        )
        return bool(result.scalar())

    async def count(self) -> int:
        """Count total records.

        Returns:
            Total count
        """
        result = await self.session.execute(
            select(func.count()).select_from(self.model)
        )
        return result.scalar_one()

    async def insert(self, instance: T) -> T:
        """Persist a new record.

        Args:
            instance: Unsaved record

        Returns:
            Stored record with generated values populated

        Raises:
            IntegrityError: If the record violates a uniqueness constraint
        """
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def save(self, instance: T) -> T:
        """Write the full state of a record, inserting or updating it.

        Args:
            instance: Record to store

        Returns:
            Stored record
        """
        instance = await self.session.merge(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance
