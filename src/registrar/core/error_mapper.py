"""
Translate low-level failure signals into the application error taxonomy.

Every function here is pure: it inspects a status code or an exception and
returns the matching ``AppError``. Callers decide whether to raise it.
"""

import httpx
from sqlalchemy.exc import IntegrityError

from registrar.core.errors import (
    AppError,
    CourseNotFoundError,
    InvalidIdentifierError,
    PersistenceConflictError,
    ResourceNotFoundError,
    StudentNotFoundError,
    UpstreamUnavailableError,
)

STUDENT = "Student"
COURSE = "Course"
ENROLLMENT = "Enrollment"

_NOT_FOUND_BY_ROLE: dict[str, type[ResourceNotFoundError]] = {
    STUDENT: StudentNotFoundError,
    COURSE: CourseNotFoundError,
}

# Upstreams reject malformed identifiers with either of these
_INVALID_ID_STATUSES = frozenset({400, 422})


def from_upstream_status(role: str, identifier: str, status_code: int) -> AppError:
    """Map a non-200 upstream answer to a failure kind for ``role``."""
    if status_code == 404:
        return _NOT_FOUND_BY_ROLE[role](identifier)
    if status_code in _INVALID_ID_STATUSES:
        return InvalidIdentifierError(role, identifier)
    return UpstreamUnavailableError(role, identifier, reason=f"HTTP {status_code}")


def from_transport_error(role: str, identifier: str, exc: httpx.HTTPError) -> AppError:
    """Network failures and timeouts all read as an unavailable upstream."""
    return UpstreamUnavailableError(role, identifier, reason=type(exc).__name__)


def from_integrity_error(exc: IntegrityError, key: str) -> AppError:
    return PersistenceConflictError(
        f"A record with key {key} already exists",
        details={"key": key, "constraint": str(exc.orig) if exc.orig else None},
    )
