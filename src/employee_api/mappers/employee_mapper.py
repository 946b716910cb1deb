"""Employee mapper."""

from employee_api.mappers.base import Mapper
from employee_api.models.dto.employee import EmployeeDto
from employee_api.models.orm.employee import EmployeeORM

# Fields copied verbatim in both directions
DESCRIPTIVE_FIELDS = ("name", "email", "department", "job_title")


class EmployeeMapper(Mapper[EmployeeDto, EmployeeORM]):
    """Maps between EmployeeDto and EmployeeORM.

    Only the identifier and the descriptive fields cross the boundary.
    ``active`` and ``created`` are owned by the service and left untouched.
    """

    def to_entity(self, dto: EmployeeDto) -> EmployeeORM:
        entity = EmployeeORM(id=dto.id)
        return self.apply(dto, entity)

    def to_dto(self, entity: EmployeeORM) -> EmployeeDto:
        return EmployeeDto.model_validate(entity)

    def apply(self, dto: EmployeeDto, entity: EmployeeORM) -> EmployeeORM:
        for field in DESCRIPTIVE_FIELDS:
            setattr(entity, field, getattr(dto, field))
        return entity
