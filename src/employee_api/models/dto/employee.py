"""Employee DTOs."""

from pydantic import BaseModel, Field, field_validator

from employee_api.constants.validation import (
    MAX_DEPARTMENT_LENGTH,
    MAX_EMAIL_LENGTH,
    MAX_EMPLOYEE_ID,
    MAX_JOB_TITLE_LENGTH,
    MAX_NAME_LENGTH,
)
from employee_api.utils.validation import validate_email_address, validate_text


class EmployeeDto(BaseModel):
    """Employee transfer object exchanged with HTTP clients.

    The ``active`` flag and creation timestamp belong to the stored record
    only and are not part of this shape. Field values are stored as sent.
    """

    id: int | None = Field(
        default=None, gt=0, le=MAX_EMPLOYEE_ID, description="Employee identifier"
    )
    name: str = Field(description="Full name of the employee")
    email: str | None = Field(default=None, description="Employee email address")
    department: str | None = Field(default=None, description="Department name")
    job_title: str | None = Field(default=None, description="Job title")

    class Config:
        """Pydantic config."""

        from_attributes = True
        extra = "forbid"

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        """Validate the required name field."""
        return validate_text(v, MAX_NAME_LENGTH, required=True)

    @field_validator("email", mode="before")
    @classmethod
    def validate_email(cls, v: str | None) -> str | None:
        """Validate the e-mail format without rewriting the address."""
        return validate_email_address(v, MAX_EMAIL_LENGTH)

    @field_validator("department", mode="before")
    @classmethod
    def validate_department(cls, v: str | None) -> str | None:
        """Validate the optional department field."""
        return validate_text(v, MAX_DEPARTMENT_LENGTH)

    @field_validator("job_title", mode="before")
    @classmethod
    def validate_job_title(cls, v: str | None) -> str | None:
        """Validate the optional job title field."""
        return validate_text(v, MAX_JOB_TITLE_LENGTH)
