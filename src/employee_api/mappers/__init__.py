"""Mappers between transfer objects and storage entities."""

from employee_api.mappers.base import Mapper
from employee_api.mappers.employee_mapper import EmployeeMapper

__all__ = [
    "Mapper",
    "EmployeeMapper",
]
