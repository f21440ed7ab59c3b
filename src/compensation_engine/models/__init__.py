"""SQLAlchemy models for the employee store."""

from compensation_engine.models.base import Base, TimestampMixin
from compensation_engine.models.employee import Employee, years_of_service

__all__ = [
    "Base",
    "TimestampMixin",
    "Employee",
    "years_of_service",
]
