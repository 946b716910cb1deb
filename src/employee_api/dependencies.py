"""Dependency injection factories for FastAPI.

Collaborators are built explicitly here and passed to the service through its
constructor; routers only ever depend on the factories.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.database import get_db
from employee_api.mappers.employee_mapper import EmployeeMapper
from employee_api.repositories.employee_repository import EmployeeRepository
from employee_api.services.employee_service import EmployeeService

# The mapper is stateless and shared by all requests
employee_mapper = EmployeeMapper()


def get_employee_repository(db: AsyncSession = Depends(get_db)) -> EmployeeRepository:
    """Get EmployeeRepository bound to the request's session."""
    return EmployeeRepository(db)


def get_employee_mapper() -> EmployeeMapper:
    """Get the shared EmployeeMapper."""
    return employee_mapper


def get_employee_service(
    repository: EmployeeRepository = Depends(get_employee_repository),
    mapper: EmployeeMapper = Depends(get_employee_mapper),
) -> EmployeeService:
    """Get EmployeeService instance."""
    return EmployeeService(repository, mapper)
