"""
Request body validation.

Each body is checked against an ordered list of ``(predicate, error factory)``
pairs. Checks run in order and the first failing one raises; later checks are
never evaluated.
"""

from datetime import date
from typing import Callable, Sequence, TypeVar

from registrar.core.config import MIN_ENROLLMENT_YEAR
from registrar.core.errors import InvalidRequestError
from registrar.models.course_schemas import CourseRequest
from registrar.models.enrollment_schemas import EnrollmentRequest

T = TypeVar("T")

Check = tuple[Callable[[T], bool], Callable[[T], InvalidRequestError]]


def run_checks(value: T, checks: Sequence[Check]) -> T:
    """Return ``value`` if every check passes, else raise the first failure."""
    for predicate, failure in checks:
        if not predicate(value):
            raise failure(value)
    return value


def _present(text: str | None) -> bool:
    return text is not None and bool(text.strip())


def max_enrollment_year() -> int:
    return date.today().year + 1


def _has_valid_enrollment_year(request: EnrollmentRequest) -> bool:
    year = request.enrollment_year
    return year is not None and MIN_ENROLLMENT_YEAR <= year <= max_enrollment_year()


ENROLLMENT_CHECKS: list[Check] = [
    (
        lambda r: _present(r.student_id),
        lambda r: InvalidRequestError("Student id is required", {"field": "studentId"}),
    ),
    (
        lambda r: _present(r.course_id),
        lambda r: InvalidRequestError("Course id is required", {"field": "courseId"}),
    ),
    (
        lambda r: r.semester is not None,
        lambda r: InvalidRequestError("Semester is required", {"field": "semester"}),
    ),
    (
        _has_valid_enrollment_year,
        lambda r: InvalidRequestError(
            f"Enrollment year must be between {MIN_ENROLLMENT_YEAR} and {max_enrollment_year()}",
            {"field": "enrollmentYear", "value": r.enrollment_year},
        ),
    ),
]


COURSE_CHECKS: list[Check] = [
    (
        lambda r: r.course_number is not None,
        lambda r: InvalidRequestError("Course number is required", {"field": "courseNumber"}),
    ),
    (
        lambda r: r.course_name is not None,
        lambda r: InvalidRequestError("Course name is required", {"field": "courseName"}),
    ),
    (
        lambda r: r.num_credits is not None and r.num_credits > 0,
        lambda r: InvalidRequestError(
            "Course credits must be greater than 0", {"field": "numCredits"}
        ),
    ),
    (
        lambda r: r.num_hours is not None and r.num_hours > 0,
        lambda r: InvalidRequestError("Course hours must be greater than 0", {"field": "numHours"}),
    ),
]


def validate_enrollment_request(request: EnrollmentRequest) -> EnrollmentRequest:
    return run_checks(request, ENROLLMENT_CHECKS)


def validate_course_request(request: CourseRequest) -> CourseRequest:
    return run_checks(request, COURSE_CHECKS)
