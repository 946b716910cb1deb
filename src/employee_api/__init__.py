"""Employee API: CRUD service for the employee resource."""
