"""Employee service for the create/retrieve/update/delete/list operations."""

import logging
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError

from employee_api.constants.validation import EMPLOYEE_ENTITY_NAME, EMPLOYEE_ID_FIELD
from employee_api.exceptions import AlreadyDeletedError, ConflictError, NotFoundError
from employee_api.mappers.base import Mapper
from employee_api.models.dto.employee import EmployeeDto
from employee_api.models.orm.employee import EmployeeORM
from employee_api.repositories.employee_repository import EmployeeRepository
from employee_api.utils.secure_logging import log_info

logger = logging.getLogger(__name__)


def _not_found(employee_id: int) -> NotFoundError:
    return NotFoundError(EMPLOYEE_ENTITY_NAME, EMPLOYEE_ID_FIELD, str(employee_id))


class EmployeeService:
    """Service for employee operations.

    Only active employees are visible through retrieval and listing. Deleting
    an employee clears its ``active`` flag, and the row is kept.
    """

    def __init__(
        self,
        repository: EmployeeRepository,
        mapper: Mapper[EmployeeDto, EmployeeORM],
    ) -> None:
        """Initialize service with its store and mapper.

        Args:
            repository: Employee store
            mapper: Transfer object <-> entity mapper
        """
        self.repository = repository
        self.mapper = mapper

    async def create_employee(self, data: EmployeeDto) -> EmployeeDto:
        """Create an active employee.

        Args:
            data: Validated employee payload

        Returns:
            The stored employee

        Raises:
            ConflictError: If the store rejects the identifier as a duplicate
        """
        employee = self.mapper.to_entity(data)
        employee.active = True
        employee.created = datetime.now(timezone.utc)

        try:
            employee = await self.repository.insert(employee)
        except IntegrityError as e:
            log_info(logger, "Cannot create employee because id already exists", e)
            raise ConflictError() from e

        if data.id is not None:
            await self.repository.sync_id_sequence()

        logger.debug(f"Created employee: {employee!r}")
        return self.mapper.to_dto(employee)

    async def get_employee(self, employee_id: int) -> EmployeeDto:
        """Get an active employee.

        Args:
            employee_id: Employee ID

        Returns:
            The employee

        Raises:
            NotFoundError: If the employee does not exist or was deleted
        """
        employee = await self.repository.find_by_id_and_active(employee_id)
        if employee is None:
            raise _not_found(employee_id)
        return self.mapper.to_dto(employee)

    async def update_employee(self, employee_id: int, data: EmployeeDto) -> EmployeeDto:
        """Replace an employee's descriptive fields.

        The path identifier wins over any ``id`` in the payload. The active
        flag and creation timestamp of the stored record are kept, so an
        inactive employee stays inactive.

        Args:
            employee_id: Employee ID
            data: Validated employee payload

        Returns:
            The updated employee

        Raises:
            NotFoundError: If no employee with this ID exists, active or not
        """
        if not await self.repository.exists_by_id(employee_id):
            raise _not_found(employee_id)

        employee = await self.repository.find_by_id(employee_id)
        if employee is None:
            raise _not_found(employee_id)

        employee = self.mapper.apply(data, employee)
        employee.id = employee_id
        employee = await self.repository.save(employee)

        logger.debug(f"Updated employee: {employee!r}")
        return self.mapper.to_dto(employee)

    async def delete_employee(self, employee_id: int) -> None:
        """Soft-delete an employee.

        Args:
            employee_id: Employee ID

        Raises:
            NotFoundError: If no employee with this ID exists
            AlreadyDeletedError: If the employee is already inactive
        """
        employee = await self.repository.find_by_id(employee_id)
        if employee is None:
            raise _not_found(employee_id)

        if not employee.active:
            raise AlreadyDeletedError(EMPLOYEE_ENTITY_NAME, str(employee_id))

        employee.active = False
        employee = await self.repository.save(employee)

        logger.debug(f"Soft deleted employee: {employee!r}")

    async def list_employees(self) -> list[EmployeeDto]:
        """List all active employees.

        Returns:
            Active employees ordered by ID
        """
        employees = await self.repository.find_all_active()
        return [self.mapper.to_dto(employee) for employee in employees]
