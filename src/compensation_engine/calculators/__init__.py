"""Compensation calculation engine."""

from compensation_engine.calculators.engine import CompensationEngine
from compensation_engine.calculators.types import (
    BonusSchedule,
    DepartmentRollup,
    EmployeeNotFound,
    EmployeeRecord,
    InvalidArgumentError,
    RaisePolicy,
    RaiseResult,
    RaiseStatus,
    StatusRule,
)

__all__ = [
    "CompensationEngine",
    "BonusSchedule",
    "DepartmentRollup",
    "EmployeeNotFound",
    "EmployeeRecord",
    "InvalidArgumentError",
    "RaisePolicy",
    "RaiseResult",
    "RaiseStatus",
    "StatusRule",
]
