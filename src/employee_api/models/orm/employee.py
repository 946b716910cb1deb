"""Employee ORM model."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from employee_api.models.orm.base import Base


class EmployeeORM(Base):
    """Employee database model.

    Rows are never deleted. Soft deletion clears ``active`` and the row stays
    in place; ``created`` is written once on insert.
    """

    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    department: Mapped[str | None] = mapped_column(String(255), nullable=True)
    job_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    __table_args__ = (Index("idx_employees_active", "active"),)

    def __repr__(self) -> str:
        return (
            f"EmployeeORM(id={self.id!r}, name={self.name!r}, email={self.email!r}, "
            f"department={self.department!r}, job_title={self.job_title!r}, "
            f"active={self.active!r}, created={self.created!r})"
        )
