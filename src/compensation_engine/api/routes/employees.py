"""Employee compensation endpoints."""

from datetime import date
from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Path, Query, status

from compensation_engine.api.dependencies import DbSession, Engine
from compensation_engine.api.schemas import (
    DepartmentReportResponse,
    EmployeeBonusResponse,
    EmployeeStatusResponse,
    ErrorResponse,
    RaiseRequest,
    RaiseResponse,
)
from compensation_engine.calculators.types import RaiseResult
from compensation_engine.services.compensation_service import CompensationService

router = APIRouter(tags=["employees"])


def _raise_response(result: RaiseResult) -> RaiseResponse:
    return RaiseResponse(
        employee_id=result.employee_id,
        status=result.status.value,
        prior_salary=result.prior_salary,
        new_salary=result.new_salary,
        applied_percentage=result.applied_percentage,
        exceeds_policy_limit=result.exceeds_policy_limit,
        message=result.message,
    )


@router.post(
    "/employees/{employee_id}/raise",
    response_model=RaiseResponse,
    status_code=status.HTTP_200_OK,
    responses={422: {"model": ErrorResponse}},
)
async def give_raise(
    db: DbSession,
    engine: Engine,
    employee_id: Annotated[int, Path()],
    payload: RaiseRequest,
) -> RaiseResponse:
    """Evaluate a raise and apply it if the employee qualifies.

    Unknown employees are reported with status NotFound, not as an error.
    """
    service = CompensationService(db, engine)
    result = await service.give_raise(employee_id, payload.percentage)
    await db.commit()
    return _raise_response(result)


@router.get(
    "/employees/bonuses",
    response_model=list[EmployeeBonusResponse],
)
async def list_bonuses(
    db: DbSession,
    engine: Engine,
    min_bonus: Annotated[Decimal | None, Query()] = None,
    as_of: Annotated[date | None, Query()] = None,
) -> list[EmployeeBonusResponse]:
    """Annual bonus per employee, highest first."""
    service = CompensationService(db, engine)
    rows = await service.bonus_report(as_of=as_of, min_bonus=min_bonus)
    return [EmployeeBonusResponse.model_validate(r) for r in rows]


@router.get(
    "/employees/statuses",
    response_model=list[EmployeeStatusResponse],
)
async def list_statuses(
    db: DbSession,
    engine: Engine,
    as_of: Annotated[date | None, Query()] = None,
) -> list[EmployeeStatusResponse]:
    """Status classification per employee."""
    service = CompensationService(db, engine)
    rows = await service.status_report(as_of=as_of)
    return [EmployeeStatusResponse.model_validate(r) for r in rows]


@router.get(
    "/departments/{department}/report",
    response_model=DepartmentReportResponse,
)
async def department_report(
    db: DbSession,
    engine: Engine,
    department: Annotated[str, Path()],
) -> DepartmentReportResponse:
    """Headcount, average salary and payroll for a department.

    Department names match exactly, including case.
    """
    service = CompensationService(db, engine)
    rollup = await service.department_report(department)
    return DepartmentReportResponse.model_validate(rollup)
