"""Tests for the SQLAlchemy employee store."""

from datetime import date
from decimal import Decimal

import pytest

from compensation_engine.models import Employee, years_of_service
from compensation_engine.services.employee_store import EmployeeStore

from .conftest import AS_OF


class TestYearsOfService:
    """Test tenure calculation from hire date."""

    def test_completed_years(self):
        assert years_of_service(date(2020, 1, 15), date(2025, 1, 15)) == 5
        assert years_of_service(date(2020, 1, 15), date(2025, 1, 14)) == 4

    def test_unknown_or_future_hire_date(self):
        assert years_of_service(None, date(2025, 1, 1)) == 0
        assert years_of_service(date(2026, 1, 1), date(2025, 1, 1)) == 0

    def test_leap_day_hire(self):
        assert years_of_service(date(2020, 2, 29), date(2021, 2, 28)) == 0
        assert years_of_service(date(2020, 2, 29), date(2021, 3, 1)) == 1


class TestEmployeeStore:
    """Test lookup and salary write-back."""

    async def test_get_returns_record(self, seeded_session):
        store = EmployeeStore(seeded_session)

        record = await store.get(1, AS_OF)

        assert record is not None
        assert record.employee_id == 1
        assert record.full_name == "John Smith"
        assert record.department == "IT"
        assert record.salary == Decimal("75000.00")
        assert record.performance_rating == 4
        assert record.years_of_service == 5

    async def test_get_missing(self, seeded_session):
        store = EmployeeStore(seeded_session)
        assert await store.get(999, AS_OF) is None

    async def test_list_all(self, seeded_session):
        store = EmployeeStore(seeded_session)

        records = await store.list_employees(AS_OF)

        assert [r.employee_id for r in records] == [1, 2, 3, 4, 5, 6, 7]

    async def test_list_by_department(self, seeded_session):
        store = EmployeeStore(seeded_session)

        records = await store.list_employees(AS_OF, department="HR")

        assert [r.full_name for r in records] == ["Sarah Johnson", "Lisa Anderson"]

    async def test_update_salary(self, seeded_session):
        store = EmployeeStore(seeded_session)

        assert await store.update_salary(4, Decimal("77000.00")) is True

        employee = await seeded_session.get(Employee, 4)
        assert employee.salary == Decimal("77000.00")

    async def test_update_salary_missing(self, seeded_session):
        store = EmployeeStore(seeded_session)
        assert await store.update_salary(999, Decimal("1.00")) is False

    async def test_add(self, session):
        store = EmployeeStore(session)

        employee = await store.add(
            "Ada", "Lovelace", "R&D", Decimal("90000.00"), date(2015, 12, 10), 5
        )

        assert employee.employee_id is not None
        record = await store.get(employee.employee_id, AS_OF)
        assert record.years_of_service == 9

    async def test_records_are_snapshots(self, seeded_session):
        """Changing the row after lookup does not change the record."""
        store = EmployeeStore(seeded_session)
        record = await store.get(2, AS_OF)

        await store.update_salary(2, Decimal("1.00"))

        assert record.salary == Decimal("65000.00")


@pytest.mark.parametrize(
    "employee_id,expected_years",
    [(1, 5), (2, 6), (3, 7), (4, 4), (5, 4), (6, 3), (7, 7)],
)
async def test_sample_tenure(seeded_session, employee_id, expected_years):
    record = await EmployeeStore(seeded_session).get(employee_id, AS_OF)
    assert record.years_of_service == expected_years
