"""Custom exceptions and error response schemas."""

import enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class ErrorKind(str, enum.Enum):
    """Failure kinds surfaced by the enrollment pipeline."""

    INVALID_REQUEST_SHAPE = "INVALID_REQUEST_SHAPE"
    INVALID_IDENTIFIER_FORMAT = "INVALID_IDENTIFIER_FORMAT"
    STUDENT_NOT_FOUND = "STUDENT_NOT_FOUND"
    COURSE_NOT_FOUND = "COURSE_NOT_FOUND"
    ENROLLMENT_NOT_FOUND = "ENROLLMENT_NOT_FOUND"
    UPSTREAM_UNAVAILABLE = "UPSTREAM_UNAVAILABLE"
    PERSISTENCE_CONFLICT = "PERSISTENCE_CONFLICT"


class ErrorDetail(BaseModel):
    """Standardized error response."""

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(None, description="Additional context")


class AppError(Exception):
    """Base exception for all app-level errors."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None,
    ):
        self.kind = kind
        self.code = kind.value
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_response(self) -> ErrorDetail:
        """Convert to API response schema."""
        return ErrorDetail(
            code=self.code,
            message=self.message,
            details=self.details if self.details else None,
        )


class InvalidRequestError(AppError):
    """Raised when a request body is missing a field or has one out of range."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(
            kind=ErrorKind.INVALID_REQUEST_SHAPE,
            message=message,
            status_code=422,
            details=details,
        )


class InvalidIdentifierError(AppError):
    """Raised when a student, course or enrollment id is malformed."""

    def __init__(self, role: str, identifier: str):
        self.role = role
        self.identifier = identifier
        super().__init__(
            kind=ErrorKind.INVALID_IDENTIFIER_FORMAT,
            message=f"{role} id={identifier} is invalid",
            status_code=422,
            details={"resource": role, "resource_id": identifier},
        )


class ResourceNotFoundError(AppError):
    """Raised when a referenced resource doesn't exist."""

    kind: ErrorKind = ErrorKind.ENROLLMENT_NOT_FOUND
    role: str = "Resource"

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(
            kind=type(self).kind,
            message=f"{self.role} with id={identifier} is not found",
            status_code=404,
            details={"resource": self.role, "resource_id": identifier},
        )


class StudentNotFoundError(ResourceNotFoundError):
    kind = ErrorKind.STUDENT_NOT_FOUND
    role = "Student"


class CourseNotFoundError(ResourceNotFoundError):
    kind = ErrorKind.COURSE_NOT_FOUND
    role = "Course"


class EnrollmentNotFoundError(ResourceNotFoundError):
    kind = ErrorKind.ENROLLMENT_NOT_FOUND
    role = "Enrollment"


class UpstreamUnavailableError(AppError):
    """Raised when a remote service can't be reached or answers with a server error."""

    def __init__(self, role: str, identifier: str, reason: str):
        self.role = role
        self.identifier = identifier
        super().__init__(
            kind=ErrorKind.UPSTREAM_UNAVAILABLE,
            message=f"{role} service is unavailable while resolving id={identifier}",
            status_code=503,
            details={"resource": role, "resource_id": identifier, "reason": reason},
        )


class PersistenceConflictError(AppError):
    """Raised when the store rejects a write on a uniqueness constraint."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(
            kind=ErrorKind.PERSISTENCE_CONFLICT,
            message=message,
            status_code=409,
            details=details,
        )
