"""Employee store backed by SQLAlchemy."""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from compensation_engine.calculators.types import EmployeeRecord
from compensation_engine.models import Employee

logger = logging.getLogger(__name__)


class EmployeeStore:
    """Lookup and salary write-back for employees.

    Reads return immutable EmployeeRecord snapshots; the only write is
    update_salary. Transaction boundaries belong to the session owner.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, employee_id: int, as_of: date) -> EmployeeRecord | None:
        """Look up an employee, or None if the identifier is unknown."""
        employee = await self.session.get(Employee, employee_id)
        if employee is None:
            return None
        return employee.to_record(as_of)

    async def list_employees(
        self,
        as_of: date,
        department: str | None = None,
    ) -> list[EmployeeRecord]:
        """List employees ordered by id, optionally for one department."""
        query = select(Employee).order_by(Employee.employee_id)
        if department is not None:
            query = query.where(Employee.department == department)

        result = await self.session.execute(query)
        return [e.to_record(as_of) for e in result.scalars().all()]

    async def update_salary(self, employee_id: int, new_salary: Decimal) -> bool:
        """Write a new salary. Returns False if the employee does not exist."""
        result = await self.session.execute(
            update(Employee)
            .where(Employee.employee_id == employee_id)
            .values(salary=new_salary)
        )
        await self.session.flush()
        updated = result.rowcount > 0
        if updated:
            logger.info("Salary for employee %s set to %s", employee_id, new_salary)
        return updated

    async def add(
        self,
        first_name: str,
        last_name: str,
        department: str | None,
        salary: Decimal,
        hire_date: date | None,
        performance_rating: int,
    ) -> Employee:
        """Insert a new employee and return the persisted row."""
        employee = Employee(
            first_name=first_name,
            last_name=last_name,
            department=department,
            salary=salary,
            hire_date=hire_date,
            performance_rating=performance_rating,
        )
        self.session.add(employee)
        await self.session.flush()
        return employee
