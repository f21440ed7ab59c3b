"""Tests for the compensation service (lookup, evaluate, persist)."""

import logging
from decimal import Decimal

from compensation_engine.calculators.types import RaiseStatus
from compensation_engine.models import Employee
from compensation_engine.services.compensation_service import CompensationService

from .conftest import AS_OF


class TestGiveRaise:
    """Test raises against the employee store."""

    async def test_approved_raise_is_persisted(self, seeded_session):
        service = CompensationService(seeded_session)

        result = await service.give_raise(1, 10, as_of=AS_OF)

        assert result.status == RaiseStatus.APPROVED
        assert result.prior_salary == Decimal("75000.00")
        assert result.new_salary == Decimal("82500.00")

        employee = await seeded_session.get(Employee, 1)
        assert employee.salary == Decimal("82500.00")

    async def test_denied_raise_not_persisted(self, seeded_session):
        service = CompensationService(seeded_session)

        result = await service.give_raise(3, 10, as_of=AS_OF)

        assert result.status == RaiseStatus.DENIED
        assert result.new_salary == Decimal("80000.00")

        employee = await seeded_session.get(Employee, 3)
        assert employee.salary == Decimal("80000.00")

    async def test_excellent_performer(self, seeded_session):
        service = CompensationService(seeded_session)

        result = await service.give_raise(2, 15, as_of=AS_OF)

        assert result.status == RaiseStatus.APPROVED
        assert result.new_salary == Decimal("74750.00")

    async def test_unknown_employee(self, seeded_session):
        service = CompensationService(seeded_session)

        result = await service.give_raise(999, 10, as_of=AS_OF)

        assert result.status == RaiseStatus.NOT_FOUND
        assert result.employee_id == 999
        assert result.new_salary is None

    async def test_raises_compound(self, seeded_session):
        """A second raise applies to the already-raised salary."""
        service = CompensationService(seeded_session)

        await service.give_raise(1, 10, as_of=AS_OF)
        result = await service.give_raise(1, 10, as_of=AS_OF)

        assert result.prior_salary == Decimal("82500.00")
        assert result.new_salary == Decimal("90750.00")


class TestReports:
    """Test department, bonus and status reports."""

    async def test_department_report(self, seeded_session):
        service = CompensationService(seeded_session)

        it = await service.department_report("IT")
        sales = await service.department_report("Sales")
        hr = await service.department_report("HR")

        assert (it.count, it.average_salary, it.total_payroll) == (
            3,
            Decimal("80000.00"),
            Decimal("240000.00"),
        )
        assert (sales.count, sales.average_salary) == (2, Decimal("69000.00"))
        assert (hr.count, hr.total_payroll) == (2, Decimal("127000.00"))

    async def test_department_report_empty(self, seeded_session, caplog):
        service = CompensationService(seeded_session)

        with caplog.at_level(logging.WARNING):
            rollup = await service.department_report("Marketing")

        assert rollup.count == 0
        assert rollup.average_salary == Decimal("0")
        assert rollup.total_payroll == Decimal("0")
        assert "No employees found in Marketing" in caplog.text

    async def test_bonus_report_ordering(self, seeded_session):
        service = CompensationService(seeded_session)

        rows = await service.bonus_report(as_of=AS_OF)

        assert [r.employee_id for r in rows] == [7, 5, 2, 1, 4, 3, 6]
        top = rows[0]
        assert top.name == "James Taylor"
        assert top.bonus == Decimal("12750.00")
        assert top.total_compensation == Decimal("97750.00")
        assert rows[-1].bonus == Decimal("0")

    async def test_bonus_report_threshold(self, seeded_session):
        service = CompensationService(seeded_session)

        rows = await service.bonus_report(as_of=AS_OF, min_bonus=10000)

        assert [(r.name, r.bonus) for r in rows] == [
            ("James Taylor", Decimal("12750.00")),
            ("David Wilson", Decimal("10200.00")),
        ]

    async def test_status_report(self, seeded_session):
        service = CompensationService(seeded_session)

        rows = await service.status_report(as_of=AS_OF)

        assert {r.employee_id: r.status for r in rows} == {
            1: "High Performer",
            2: "Senior Star Performer",
            3: "Good Standing",
            4: "High Performer",
            5: "High Performer",
            6: "Needs Improvement",
            7: "Senior Star Performer",
        }
