"""Data Transfer Objects package."""

from employee_api.models.dto.employee import EmployeeDto
from employee_api.models.dto.error import ErrorResponse

__all__ = [
    "EmployeeDto",
    "ErrorResponse",
]
