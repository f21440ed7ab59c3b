"""API routes."""

from compensation_engine.api.routes.compensation import router as compensation_router
from compensation_engine.api.routes.employees import router as employees_router
from compensation_engine.api.routes.health import router as health_router

__all__ = ["compensation_router", "employees_router", "health_router"]
