"""Employee model."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import CheckConstraint, Date, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from compensation_engine.calculators.types import EmployeeRecord
from compensation_engine.models.base import Base, TimestampMixin


def years_of_service(hire_date: date | None, as_of: date) -> int:
    """Count completed anniversary years between hire_date and as_of.

    Unknown or future hire dates count as zero years.
    """
    if hire_date is None or hire_date > as_of:
        return 0
    years = as_of.year - hire_date.year
    if (as_of.month, as_of.day) < (hire_date.month, hire_date.day):
        years -= 1
    return years


class Employee(Base, TimestampMixin):
    """Employee record with current salary and latest performance rating."""

    __tablename__ = "employee"

    employee_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    department: Mapped[str | None] = mapped_column(String(50), nullable=True)
    salary: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    hire_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    performance_rating: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (
        CheckConstraint("salary >= 0", name="employee_salary_nonnegative"),
        CheckConstraint(
            "performance_rating BETWEEN 1 AND 5",
            name="employee_rating_check",
        ),
        Index("employee_department_idx", "department"),
    )

    @property
    def full_name(self) -> str:
        """Get full name."""
        return f"{self.first_name} {self.last_name}"

    def to_record(self, as_of: date) -> EmployeeRecord:
        """Snapshot this row for evaluation, with tenure as of a date."""
        return EmployeeRecord(
            employee_id=self.employee_id,
            salary=self.salary,
            performance_rating=self.performance_rating,
            years_of_service=years_of_service(self.hire_date, as_of),
            department=self.department,
            first_name=self.first_name,
            last_name=self.last_name,
        )
