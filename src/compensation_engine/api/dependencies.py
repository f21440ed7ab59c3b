"""FastAPI dependencies for dependency injection."""

from collections.abc import AsyncGenerator
from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from compensation_engine.calculators.engine import CompensationEngine
from compensation_engine.config import get_settings
from compensation_engine.database import init_db


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session dependency."""
    _, factory = init_db()
    async with factory() as session:
        try:
            yield session
        finally:
            await session.close()


@lru_cache(maxsize=1)
def get_compensation_engine() -> CompensationEngine:
    """Engine shared by all requests; it holds no mutable state."""
    return CompensationEngine.from_settings(get_settings())


# Type aliases for cleaner dependency injection
DbSession = Annotated[AsyncSession, Depends(get_db_session)]
Engine = Annotated[CompensationEngine, Depends(get_compensation_engine)]
