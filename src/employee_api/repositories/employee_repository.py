"""Employee repository."""

from sqlalchemy import Select, func, select

from employee_api.models.orm.employee import EmployeeORM
from employee_api.repositories.base import BaseRepository


def id_sequence_sync_statement() -> Select:
    """Build the Postgres statement that moves the id sequence to the highest ID."""
    return select(
        func.setval(
            func.pg_get_serial_sequence(EmployeeORM.__tablename__, "id"),
            select(func.max(EmployeeORM.id)).scalar_subquery(),
        )
    )


class EmployeeRepository(BaseRepository[EmployeeORM]):
    """Repository for employee operations."""

    model = EmployeeORM

    async def find_by_id_and_active(self, id: int) -> EmployeeORM | None:
        """Get an employee by ID if it has not been soft-deleted.

        Args:
            id: Employee ID

        Returns:
            EmployeeORM or None if not found or inactive
        """
        result = await self.session.execute(
            select(EmployeeORM).where(EmployeeORM.id == id, EmployeeORM.active.is_(True))
        )
        return result.scalar_one_or_none()

    async def find_all_active(self) -> list[EmployeeORM]:
        """Get all employees that have not been soft-deleted.

        Returns:
            Active employees ordered by ID
        """
        result = await self.session.execute(
            select(EmployeeORM).where(EmployeeORM.active.is_(True)).order_by(EmployeeORM.id)
        )
        return list(result.scalars().all())

    async def sync_id_sequence(self) -> None:
        """Advance the id sequence past an explicitly inserted ID.

        Postgres sequences do not see caller-chosen IDs. SQLite derives the
        next ID from the table, so nothing is done there.
        """
        if self.session.get_bind().dialect.name != "postgresql":
            return
        await self.session.execute(id_sequence_sync_statement())
