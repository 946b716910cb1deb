"""Centralized validation constants for the employee API.

Single source of truth for field limits and entity naming used across the
transfer objects, services and error responses.
"""

from typing import Final

# =============================================================================
# Employee Constants
# =============================================================================

EMPLOYEE_ENTITY_NAME: Final[str] = "Employee"
EMPLOYEE_ID_FIELD: Final[str] = "id"

# Upper bound of the 32-bit integer id column
MAX_EMPLOYEE_ID: Final[int] = 2**31 - 1

MAX_NAME_LENGTH: Final[int] = 255
MAX_EMAIL_LENGTH: Final[int] = 255
MAX_DEPARTMENT_LENGTH: Final[int] = 255
MAX_JOB_TITLE_LENGTH: Final[int] = 255

# =============================================================================
# Error Response Constants
# =============================================================================

MAX_REPORTED_FIELD_ERRORS: Final[int] = 10
