"""Compensation service - lookup, evaluate, persist."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from compensation_engine.calculators.engine import CompensationEngine
from compensation_engine.calculators.types import (
    DepartmentRollup,
    EmployeeNotFound,
    RaiseResult,
    RaiseStatus,
    to_decimal,
)
from compensation_engine.services.employee_store import EmployeeStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmployeeBonus:
    """One row of the bonus report."""

    employee_id: int
    name: str
    department: str | None
    salary: Decimal
    performance_rating: int
    bonus: Decimal
    total_compensation: Decimal


@dataclass(frozen=True)
class EmployeeStatus:
    """One row of the status report."""

    employee_id: int
    name: str
    performance_rating: int
    years_of_service: int
    status: str


class CompensationService:
    """Runs engine evaluations against the employee store.

    The engine never touches the store; this service looks employees up,
    evaluates, and writes approved salaries back inside the caller's session.
    """

    def __init__(self, session: AsyncSession, engine: CompensationEngine | None = None):
        self.session = session
        self.store = EmployeeStore(session)
        self.engine = engine or CompensationEngine()

    async def give_raise(
        self,
        employee_id: int,
        percentage: Any,
        as_of: date | None = None,
    ) -> RaiseResult:
        """Evaluate a raise and persist the new salary if approved."""
        as_of = as_of or date.today()
        record = await self.store.get(employee_id, as_of)
        result = self.engine.evaluate_raise(
            record if record is not None else EmployeeNotFound(employee_id),
            percentage,
        )

        if result.status == RaiseStatus.APPROVED:
            assert result.new_salary is not None
            await self.store.update_salary(employee_id, result.new_salary)
        elif result.status == RaiseStatus.NOT_FOUND:
            logger.info("Raise requested for unknown employee %s", employee_id)
        else:
            logger.info(
                "Raise denied for employee %s (rating %s)",
                employee_id,
                result.performance_rating,
            )
        return result

    async def department_report(
        self, department: str, as_of: date | None = None
    ) -> DepartmentRollup:
        """Aggregate salaries for a department."""
        employees = await self.store.list_employees(as_of or date.today())
        rollup = self.engine.department_rollup(employees, department)
        if rollup.count == 0:
            logger.warning("No employees found in %s department", department)
        return rollup

    async def bonus_report(
        self,
        as_of: date | None = None,
        min_bonus: Any = None,
    ) -> list[EmployeeBonus]:
        """Bonus and total compensation per employee, highest bonus first.

        With min_bonus, only employees whose bonus exceeds it are included.
        """
        threshold = to_decimal(min_bonus, "min_bonus") if min_bonus is not None else None
        employees = await self.store.list_employees(as_of or date.today())

        rows: list[EmployeeBonus] = []
        for emp in employees:
            bonus = self.engine.calculate_bonus(emp.salary, emp.performance_rating)
            if threshold is not None and bonus <= threshold:
                continue
            rows.append(
                EmployeeBonus(
                    employee_id=emp.employee_id,
                    name=emp.full_name,
                    department=emp.department,
                    salary=emp.salary,
                    performance_rating=emp.performance_rating,
                    bonus=bonus,
                    total_compensation=emp.salary + bonus,
                )
            )

        # Stable sort keeps id order among equal bonuses
        rows.sort(key=lambda r: r.bonus, reverse=True)
        return rows

    async def status_report(self, as_of: date | None = None) -> list[EmployeeStatus]:
        """Status label per employee."""
        employees = await self.store.list_employees(as_of or date.today())
        return [
            EmployeeStatus(
                employee_id=emp.employee_id,
                name=emp.full_name,
                performance_rating=emp.performance_rating,
                years_of_service=emp.years_of_service,
                status=self.engine.classify_status(
                    emp.performance_rating, emp.years_of_service
                ),
            )
            for emp in employees
        ]
