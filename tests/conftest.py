"""Pytest fixtures for compensation engine tests."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from compensation_engine.calculators.engine import CompensationEngine
from compensation_engine.calculators.types import EmployeeRecord
from compensation_engine.models import Base
from compensation_engine.services.seed import seed_sample_employees

# Use in-memory SQLite for tests (with async support)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Tenure is computed against a fixed date so reports are reproducible
AS_OF = date(2025, 6, 30)


@pytest.fixture
def engine() -> CompensationEngine:
    """Engine with the default bonus schedule, status rules and raise policy."""
    return CompensationEngine()


@pytest.fixture
def make_employee():
    """Factory for EmployeeRecord values."""

    def _make(
        salary: str = "75000.00",
        rating: int = 4,
        years: int = 3,
        employee_id: int = 1,
        department: str | None = "IT",
    ) -> EmployeeRecord:
        return EmployeeRecord(
            employee_id=employee_id,
            salary=Decimal(salary),
            performance_rating=rating,
            years_of_service=years,
            department=department,
        )

    return _make


@pytest_asyncio.fixture
async def db_engine():
    """Create test database engine with the schema in place."""
    db_engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with db_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield db_engine

    await db_engine.dispose()


@pytest.fixture
def session_factory(db_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for each test."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def seeded_session(session: AsyncSession) -> AsyncSession:
    """Session with the seven sample employees inserted (ids 1..7)."""
    await seed_sample_employees(session)
    await session.commit()
    return session
