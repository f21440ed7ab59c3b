"""Business services for compensation workflows."""

from compensation_engine.services.compensation_service import (
    CompensationService,
    EmployeeBonus,
    EmployeeStatus,
)
from compensation_engine.services.employee_store import EmployeeStore

__all__ = [
    "CompensationService",
    "EmployeeBonus",
    "EmployeeStatus",
    "EmployeeStore",
]
