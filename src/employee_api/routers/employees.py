"""Employee router."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status

from employee_api.constants.validation import MAX_EMPLOYEE_ID
from employee_api.dependencies import get_employee_service
from employee_api.models.dto.employee import EmployeeDto
from employee_api.models.dto.error import ErrorResponse
from employee_api.services.employee_service import EmployeeService

router = APIRouter()

EmployeeId = Annotated[int, Path(ge=1, le=MAX_EMPLOYEE_ID, description="Employee identifier")]
Service = Annotated[EmployeeService, Depends(get_employee_service)]

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Invalid request"},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Employee not found"},
    status.HTTP_409_CONFLICT: {"model": ErrorResponse, "description": "Conflict"},
}


@router.post(
    "",
    response_model=EmployeeDto,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: ERROR_RESPONSES[status.HTTP_400_BAD_REQUEST],
        status.HTTP_409_CONFLICT: ERROR_RESPONSES[status.HTTP_409_CONFLICT],
    },
)
async def create_employee(request: EmployeeDto, service: Service) -> EmployeeDto:
    """Create an employee."""
    return await service.create_employee(request)


@router.get(
    "/{employee_id}",
    response_model=EmployeeDto,
    responses={status.HTTP_404_NOT_FOUND: ERROR_RESPONSES[status.HTTP_404_NOT_FOUND]},
)
async def get_employee(employee_id: EmployeeId, service: Service) -> EmployeeDto:
    """Get an active employee by ID."""
    return await service.get_employee(employee_id)


@router.put(
    "/{employee_id}",
    response_model=EmployeeDto,
    responses={
        status.HTTP_400_BAD_REQUEST: ERROR_RESPONSES[status.HTTP_400_BAD_REQUEST],
        status.HTTP_404_NOT_FOUND: ERROR_RESPONSES[status.HTTP_404_NOT_FOUND],
    },
)
async def update_employee(
    employee_id: EmployeeId,
    request: EmployeeDto,
    service: Service,
) -> EmployeeDto:
    """Replace an employee's fields. The path ID overrides any ID in the body."""
    return await service.update_employee(employee_id, request)


@router.delete(
    "/{employee_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        status.HTTP_404_NOT_FOUND: ERROR_RESPONSES[status.HTTP_404_NOT_FOUND],
        status.HTTP_409_CONFLICT: ERROR_RESPONSES[status.HTTP_409_CONFLICT],
    },
)
async def delete_employee(employee_id: EmployeeId, service: Service) -> Response:
    """Soft-delete an employee."""
    await service.delete_employee(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("", response_model=list[EmployeeDto])
async def list_employees(service: Service) -> list[EmployeeDto]:
    """List all active employees."""
    return await service.list_employees()
