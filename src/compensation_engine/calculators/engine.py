"""Compensation engine - raise, bonus and status evaluation."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any

from compensation_engine.calculators.types import (
    DEFAULT_STATUS_RULES,
    ZERO,
    BonusSchedule,
    DepartmentRollup,
    EmployeeNotFound,
    EmployeeRecord,
    EngineConfiguration,
    InvalidArgumentError,
    RaisePolicy,
    RaiseResult,
    RaiseStatus,
    StatusRule,
    round_to_cents,
    to_decimal,
)

if TYPE_CHECKING:
    from decimal import Decimal

    from compensation_engine.config import Settings

logger = logging.getLogger(__name__)


class CompensationEngine:
    """Stateless compensation evaluator.

    Bonus schedule, status rules and raise policy are fixed at construction.
    Every operation is a pure function of its arguments, so one engine can be
    shared between any number of callers. Persistence is the caller's job:
    look up the employee, evaluate, then write back the result.

    Status rules are evaluated strictly in the order given; the first rule
    whose rating and tenure floors are both met wins. The last rule must be a
    catch-all so that every input gets exactly one label.
    """

    def __init__(
        self,
        bonus_schedule: BonusSchedule | None = None,
        status_rules: Sequence[StatusRule] | None = None,
        raise_policy: RaisePolicy | None = None,
    ):
        self.bonus_schedule = (
            bonus_schedule if bonus_schedule is not None else BonusSchedule.default()
        )
        rules = tuple(status_rules) if status_rules is not None else DEFAULT_STATUS_RULES
        if not rules or not rules[-1].is_catch_all:
            raise InvalidArgumentError(
                "status_rules", rules, "last rule must match every rating and tenure"
            )
        self.status_rules: tuple[StatusRule, ...] = rules
        self.raise_policy = raise_policy or RaisePolicy()

    @classmethod
    def from_settings(cls, settings: Settings) -> CompensationEngine:
        """Build an engine using the configured raise thresholds."""
        return cls(
            raise_policy=RaisePolicy(
                minimum_rating=settings.raise_min_rating,
                warning_percentage=settings.raise_warning_percentage,
            )
        )

    @property
    def configuration(self) -> EngineConfiguration:
        return EngineConfiguration(
            bonus_tiers=self.bonus_schedule.as_dict(),
            status_rules=self.status_rules,
            raise_policy=self.raise_policy,
        )

    def evaluate_raise(
        self,
        employee: EmployeeRecord | EmployeeNotFound | None,
        requested_percentage: Any,
    ) -> RaiseResult:
        """Evaluate a raise request.

        Args:
            employee: The employee, or EmployeeNotFound / None when the
                lookup failed
            requested_percentage: Percentage increase, e.g. 10 for 10%

        Returns:
            RaiseResult with status Approved, Denied or NotFound

        Raises:
            InvalidArgumentError: If requested_percentage is negative
        """
        pct = to_decimal(requested_percentage, "requested_percentage")
        if pct < 0:
            raise InvalidArgumentError(
                "requested_percentage", requested_percentage, "must be >= 0"
            )

        if employee is None or isinstance(employee, EmployeeNotFound):
            employee_id = employee.employee_id if employee is not None else None
            return RaiseResult(
                employee_id=employee_id,
                status=RaiseStatus.NOT_FOUND,
                prior_salary=None,
                new_salary=None,
                applied_percentage=pct,
            )

        prior = round_to_cents(employee.salary)

        if employee.performance_rating < self.raise_policy.minimum_rating:
            return RaiseResult(
                employee_id=employee.employee_id,
                status=RaiseStatus.DENIED,
                prior_salary=prior,
                new_salary=prior,
                applied_percentage=pct,
                performance_rating=employee.performance_rating,
                minimum_rating=self.raise_policy.minimum_rating,
            )

        new_salary = round_to_cents(prior * (1 + pct / 100))
        exceeds = pct > self.raise_policy.warning_percentage
        if exceeds:
            logger.warning(
                "Raise of %s%% for employee %s exceeds policy limit of %s%%",
                pct,
                employee.employee_id,
                self.raise_policy.warning_percentage,
            )

        return RaiseResult(
            employee_id=employee.employee_id,
            status=RaiseStatus.APPROVED,
            prior_salary=prior,
            new_salary=new_salary,
            applied_percentage=pct,
            performance_rating=employee.performance_rating,
            exceeds_policy_limit=exceeds,
        )

    def calculate_bonus(self, salary: Any, rating: int) -> Decimal:
        """Calculate annual bonus from the tiered schedule.

        Ratings outside the schedule earn zero rather than failing.
        """
        amount = to_decimal(salary, "salary")
        if amount < 0:
            raise InvalidArgumentError("salary", salary, "must be >= 0")
        return round_to_cents(amount * self.bonus_schedule.percentage_for(rating))

    def total_compensation(self, salary: Any, rating: int) -> Decimal:
        """Salary plus annual bonus."""
        bonus = self.calculate_bonus(salary, rating)
        return round_to_cents(to_decimal(salary, "salary")) + bonus

    def classify_status(self, rating: int, years_of_service: int) -> str:
        """Return the label of the first status rule that matches."""
        if years_of_service < 0:
            raise InvalidArgumentError("years_of_service", years_of_service, "must be >= 0")

        for rule in self.status_rules:
            if rule.matches(rating, years_of_service):
                return rule.label

        # Unreachable: the constructor guarantees a trailing catch-all
        raise AssertionError("status rules exhausted without a match")

    def department_rollup(
        self, employees: Iterable[EmployeeRecord], department: str
    ) -> DepartmentRollup:
        """Headcount, mean salary and payroll for one department.

        Department names are compared exactly, including case.
        """
        count = 0
        total = ZERO
        for employee in employees:
            if employee.department == department:
                count += 1
                total += employee.salary

        if count == 0:
            return DepartmentRollup(department=department)

        return DepartmentRollup(
            department=department,
            count=count,
            average_salary=round_to_cents(total / count),
            total_payroll=round_to_cents(total),
        )
