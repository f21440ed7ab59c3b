"""Type definitions for compensation calculations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Any

CENTS = Decimal("0.01")
ZERO = Decimal("0")
VALID_RATINGS = (1, 2, 3, 4, 5)


class InvalidArgumentError(ValueError):
    """Raised for malformed numeric input or invalid configuration."""

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field}={value!r}: {reason}")


def to_decimal(value: Any, field: str) -> Decimal:
    """Convert a numeric input to Decimal.

    Floats go through ``str`` so 0.1 becomes Decimal("0.1") rather than its
    binary expansion. Booleans and non-finite values are rejected.
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(field, value, "must be a number")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float, str)):
        try:
            result = Decimal(str(value))
        except InvalidOperation:
            raise InvalidArgumentError(field, value, "must be a number") from None
    else:
        raise InvalidArgumentError(field, value, "must be a number")

    if not result.is_finite():
        raise InvalidArgumentError(field, value, "must be finite")
    return result


def round_to_cents(amount: Decimal) -> Decimal:
    """Round to 2 decimal places using half-up rounding."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class EmployeeRecord:
    """Snapshot of the employee attributes the engine evaluates."""

    employee_id: Any
    salary: Decimal
    performance_rating: int
    years_of_service: int
    department: str | None = None
    first_name: str | None = None
    last_name: str | None = None

    def __post_init__(self) -> None:
        salary = to_decimal(self.salary, "salary")
        if salary < 0:
            raise InvalidArgumentError("salary", self.salary, "must be >= 0")
        # Normalize to Decimal on a frozen instance
        object.__setattr__(self, "salary", salary)

        rating = self.performance_rating
        if isinstance(rating, bool) or rating not in VALID_RATINGS:
            raise InvalidArgumentError(
                "performance_rating", self.performance_rating, "must be in 1..5"
            )
        if self.years_of_service < 0:
            raise InvalidArgumentError(
                "years_of_service", self.years_of_service, "must be >= 0"
            )

    @property
    def full_name(self) -> str:
        """Get full name (empty when no name is known)."""
        return " ".join(p for p in (self.first_name, self.last_name) if p)


@dataclass(frozen=True)
class EmployeeNotFound:
    """Lookup failure indicator passed in place of an EmployeeRecord."""

    employee_id: Any


class RaiseStatus(str, Enum):
    """Outcome of a raise evaluation."""

    APPROVED = "Approved"
    DENIED = "Denied"
    NOT_FOUND = "NotFound"


@dataclass(frozen=True)
class RaiseResult:
    """Result of evaluating a raise request.

    ``prior_salary`` and ``new_salary`` are None only for NOT_FOUND.
    """

    employee_id: Any
    status: RaiseStatus
    prior_salary: Decimal | None
    new_salary: Decimal | None
    applied_percentage: Decimal
    performance_rating: int | None = None
    minimum_rating: int | None = None
    exceeds_policy_limit: bool = False

    @property
    def increase(self) -> Decimal | None:
        """Salary delta, or None when the employee was not found."""
        if self.prior_salary is None or self.new_salary is None:
            return None
        return self.new_salary - self.prior_salary

    @property
    def message(self) -> str:
        """Human-readable outcome."""
        if self.status == RaiseStatus.NOT_FOUND:
            return f"Error: Employee ID {self.employee_id} does not exist"
        if self.status == RaiseStatus.DENIED:
            return (
                f"DENIED: Employee {self.employee_id} does not qualify for raise. "
                f"Performance rating: {self.performance_rating} "
                f"(minimum {self.minimum_rating} required)"
            )
        return (
            f"SUCCESS: Salary updated for employee {self.employee_id}. "
            f"Old salary: ${self.prior_salary}, New salary: ${self.new_salary} "
            f"({self.applied_percentage}% increase)"
        )


@dataclass(frozen=True)
class RaisePolicy:
    """Raise eligibility thresholds."""

    minimum_rating: int = 4
    # Approved raises above this percentage are flagged, not rejected
    warning_percentage: Decimal = Decimal("100")


class BonusSchedule:
    """Immutable mapping from performance rating to bonus percentage.

    Ratings without a tier earn no bonus.
    """

    __slots__ = ("_tiers",)

    def __init__(self, tiers: Mapping[int, Any] | Iterable[tuple[int, Any]]):
        items = tiers.items() if isinstance(tiers, Mapping) else tiers
        seen: set[int] = set()
        normalized: list[tuple[int, Decimal]] = []
        for rating, percentage in items:
            if rating in seen:
                raise InvalidArgumentError("bonus_schedule", rating, "duplicate rating tier")
            pct = to_decimal(percentage, "bonus_percentage")
            if pct < 0:
                raise InvalidArgumentError("bonus_percentage", percentage, "must be >= 0")
            seen.add(rating)
            normalized.append((rating, pct))
        self._tiers: tuple[tuple[int, Decimal], ...] = tuple(normalized)

    @classmethod
    def default(cls) -> BonusSchedule:
        return cls({5: Decimal("0.15"), 4: Decimal("0.10"), 3: Decimal("0.05")})

    def percentage_for(self, rating: int) -> Decimal:
        """Get bonus percentage (as a fraction) for a rating."""
        for tier_rating, pct in self._tiers:
            if tier_rating == rating:
                return pct
        return ZERO

    def as_dict(self) -> dict[int, Decimal]:
        return dict(self._tiers)

    def __iter__(self) -> Iterator[tuple[int, Decimal]]:
        return iter(self._tiers)

    def __len__(self) -> int:
        return len(self._tiers)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BonusSchedule):
            return NotImplemented
        return self._tiers == other._tiers

    def __hash__(self) -> int:
        return hash(self._tiers)

    def __repr__(self) -> str:
        return f"BonusSchedule({self.as_dict()!r})"


@dataclass(frozen=True)
class StatusRule:
    """Classification rule: applies when rating and tenure meet both floors.

    A rule with ``minimum_rating=None`` matches any rating.
    """

    label: str
    minimum_rating: int | None = None
    minimum_tenure: int = 0

    @property
    def is_catch_all(self) -> bool:
        return self.minimum_rating is None and self.minimum_tenure <= 0

    def matches(self, rating: int, years_of_service: int) -> bool:
        if self.minimum_rating is not None and rating < self.minimum_rating:
            return False
        return years_of_service >= self.minimum_tenure


DEFAULT_STATUS_RULES: tuple[StatusRule, ...] = (
    StatusRule("Senior Star Performer", minimum_rating=5, minimum_tenure=5),
    StatusRule("High Performer", minimum_rating=4, minimum_tenure=3),
    StatusRule("Good Standing", minimum_rating=3),
    StatusRule("Needs Improvement", minimum_rating=2),
    StatusRule("Under Review"),
)


@dataclass(frozen=True)
class DepartmentRollup:
    """Aggregate salary figures for one department."""

    department: str
    count: int = 0
    average_salary: Decimal = ZERO
    total_payroll: Decimal = ZERO

    def to_dict(self) -> dict[str, Any]:
        return {
            "department": self.department,
            "count": self.count,
            "average_salary": self.average_salary,
            "total_payroll": self.total_payroll,
        }


@dataclass(frozen=True)
class EngineConfiguration:
    """Snapshot of an engine's rules, for display and auditing."""

    bonus_tiers: dict[int, Decimal] = field(default_factory=dict)
    status_rules: tuple[StatusRule, ...] = ()
    raise_policy: RaisePolicy = field(default_factory=RaisePolicy)
