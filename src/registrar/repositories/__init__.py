"""Persistence adapters."""

from registrar.repositories.enrollment_repository import SqlAlchemyEnrollmentStore

__all__ = ["SqlAlchemyEnrollmentStore"]
