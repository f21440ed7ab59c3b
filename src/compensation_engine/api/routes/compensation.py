"""Stateless calculator endpoints."""

from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Query

from compensation_engine.api.dependencies import Engine
from compensation_engine.api.schemas import (
    BonusQuoteResponse,
    ErrorResponse,
    RulesResponse,
    StatusQuoteResponse,
    StatusRuleResponse,
)

router = APIRouter(prefix="/compensation", tags=["compensation"])


@router.get(
    "/bonus",
    response_model=BonusQuoteResponse,
    responses={422: {"model": ErrorResponse}},
)
async def quote_bonus(
    engine: Engine,
    salary: Annotated[Decimal, Query()],
    rating: Annotated[int, Query()],
) -> BonusQuoteResponse:
    """Calculate the bonus for a salary and rating."""
    bonus = engine.calculate_bonus(salary, rating)
    return BonusQuoteResponse(
        salary=salary,
        rating=rating,
        bonus=bonus,
        total_compensation=engine.total_compensation(salary, rating),
    )


@router.get(
    "/status",
    response_model=StatusQuoteResponse,
    responses={422: {"model": ErrorResponse}},
)
async def quote_status(
    engine: Engine,
    rating: Annotated[int, Query()],
    years_of_service: Annotated[int, Query()],
) -> StatusQuoteResponse:
    """Classify a rating and tenure."""
    return StatusQuoteResponse(
        rating=rating,
        years_of_service=years_of_service,
        status=engine.classify_status(rating, years_of_service),
    )


@router.get("/rules", response_model=RulesResponse)
async def get_rules(engine: Engine) -> RulesResponse:
    """Show the configured bonus tiers, status rules and raise policy."""
    config = engine.configuration
    return RulesResponse(
        bonus_tiers=config.bonus_tiers,
        status_rules=[StatusRuleResponse.model_validate(r) for r in config.status_rules],
        raise_minimum_rating=config.raise_policy.minimum_rating,
        raise_warning_percentage=config.raise_policy.warning_percentage,
    )
