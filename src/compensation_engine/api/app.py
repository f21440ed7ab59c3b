"""FastAPI application factory."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from compensation_engine import __version__
from compensation_engine.api.routes import (
    compensation_router,
    employees_router,
    health_router,
)
from compensation_engine.calculators.types import InvalidArgumentError
from compensation_engine.database import create_schema, dispose_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    await create_schema()
    yield
    await dispose_db()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Compensation Engine API",
        description="Raise eligibility, bonus tiers and status classification",
        version=__version__,
        lifespan=lifespan,
    )

    # Exception handlers
    @app.exception_handler(InvalidArgumentError)
    async def invalid_argument_handler(
        request: Request, exc: InvalidArgumentError
    ) -> JSONResponse:
        """Reject malformed numeric input."""
        return JSONResponse(
            status_code=422,
            content={
                "detail": str(exc),
                "code": "INVALID_ARGUMENT",
                "field": exc.field,
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )

    # Include routers
    app.include_router(health_router)
    app.include_router(employees_router, prefix="/api/v1")
    app.include_router(compensation_router, prefix="/api/v1")

    return app


# Default app instance for uvicorn
app = create_app()
