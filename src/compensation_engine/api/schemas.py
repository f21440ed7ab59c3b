"""Pydantic schemas for API request/response models."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict


# ============================================================================
# Raise schemas
# ============================================================================


class RaiseRequest(BaseModel):
    """Schema for requesting a raise."""

    percentage: Decimal


class RaiseResponse(BaseModel):
    """Schema for raise evaluation result."""

    model_config = ConfigDict(from_attributes=True)

    employee_id: int
    status: str
    prior_salary: Decimal | None = None
    new_salary: Decimal | None = None
    applied_percentage: Decimal
    exceeds_policy_limit: bool = False
    message: str


# ============================================================================
# Report schemas
# ============================================================================


class EmployeeBonusResponse(BaseModel):
    """Schema for one bonus report row."""

    model_config = ConfigDict(from_attributes=True)

    employee_id: int
    name: str
    department: str | None = None
    salary: Decimal
    performance_rating: int
    bonus: Decimal
    total_compensation: Decimal


class EmployeeStatusResponse(BaseModel):
    """Schema for one status report row."""

    model_config = ConfigDict(from_attributes=True)

    employee_id: int
    name: str
    performance_rating: int
    years_of_service: int
    status: str


class DepartmentReportResponse(BaseModel):
    """Schema for department rollup."""

    model_config = ConfigDict(from_attributes=True)

    department: str
    count: int
    average_salary: Decimal
    total_payroll: Decimal


# ============================================================================
# Calculator schemas
# ============================================================================


class BonusQuoteResponse(BaseModel):
    """Schema for an ad-hoc bonus calculation."""

    salary: Decimal
    rating: int
    bonus: Decimal
    total_compensation: Decimal


class StatusQuoteResponse(BaseModel):
    """Schema for an ad-hoc status classification."""

    rating: int
    years_of_service: int
    status: str


class StatusRuleResponse(BaseModel):
    """Schema for one configured status rule."""

    model_config = ConfigDict(from_attributes=True)

    label: str
    minimum_rating: int | None = None
    minimum_tenure: int


class RulesResponse(BaseModel):
    """Schema for the engine's configured rules."""

    bonus_tiers: dict[int, Decimal]
    status_rules: list[StatusRuleResponse]
    raise_minimum_rating: int
    raise_warning_percentage: Decimal


# ============================================================================
# Error schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str
    code: str | None = None
    field: str | None = None
