"""Sample employee data for demos and tests."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from compensation_engine.models import Employee
from compensation_engine.services.employee_store import EmployeeStore

# (first_name, last_name, department, salary, hire_date, performance_rating)
SAMPLE_EMPLOYEES: tuple[tuple[str, str, str, Decimal, date, int], ...] = (
    ("John", "Smith", "IT", Decimal("75000.00"), date(2020, 1, 15), 4),
    ("Sarah", "Johnson", "HR", Decimal("65000.00"), date(2019, 3, 20), 5),
    ("Michael", "Brown", "IT", Decimal("80000.00"), date(2018, 6, 10), 3),
    ("Emily", "Davis", "Sales", Decimal("70000.00"), date(2021, 2, 28), 4),
    ("David", "Wilson", "Sales", Decimal("68000.00"), date(2020, 11, 5), 5),
    ("Lisa", "Anderson", "HR", Decimal("62000.00"), date(2021, 7, 12), 2),
    ("James", "Taylor", "IT", Decimal("85000.00"), date(2017, 9, 30), 5),
)


async def seed_sample_employees(session: AsyncSession) -> int:
    """Insert the sample employees into an empty table.

    Returns the number of rows inserted (0 if employees already exist).
    """
    existing = await session.scalar(select(func.count()).select_from(Employee))
    if existing:
        return 0

    store = EmployeeStore(session)
    for first, last, dept, salary, hired, rating in SAMPLE_EMPLOYEES:
        await store.add(first, last, dept, salary, hired, rating)
    return len(SAMPLE_EMPLOYEES)
