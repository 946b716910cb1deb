"""Central route path constants.

Routers and error handlers share these so error bodies report the same path
the router is mounted on.
"""

from typing import Final

EMPLOYEE_BASE_PATH: Final[str] = "/employee"
HEALTH_PATH: Final[str] = "/health"
