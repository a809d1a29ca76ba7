"""Interfaces the services depend on; implemented in clients/ and repositories/."""

from registrar.ports.enrollment_store import EnrollmentStore
from registrar.ports.lookups import CourseLookup, StudentLookup

__all__ = ["CourseLookup", "EnrollmentStore", "StudentLookup"]
