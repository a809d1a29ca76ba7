"""Conversions between pipeline context, stored records and API projections."""

from registrar.models.course import Course
from registrar.models.course_schemas import CourseResponse
from registrar.models.enrollment import Enrollment
from registrar.models.enrollment_schemas import EnrollmentResponse
from registrar.models.remote import RequestContext


def to_record(
    context: RequestContext,
    enrollment_id: str,
    storage_key: str | None = None,
) -> Enrollment:
    """
    Build an enrollment from a fully resolved context.

    ``storage_key`` is left unset for new records so the store assigns one;
    updates pass the existing key to overwrite the same row.
    """
    if not context.is_resolved:
        raise ValueError("student and course must be resolved before building a record")

    request, student, course = context.request, context.student, context.course
    record = Enrollment(
        enrollment_id=enrollment_id,
        enrollment_year=request.enrollment_year,
        semester=request.semester,
        student_id=student.student_id,
        student_first_name=student.first_name,
        student_last_name=student.last_name,
        course_id=course.course_id,
        course_number=course.course_number,
        course_name=course.course_name,
    )
    if storage_key is not None:
        record.id = storage_key
    return record


def to_response(record: Enrollment) -> EnrollmentResponse:
    return EnrollmentResponse.model_validate(record)


def to_course_response(course: Course) -> CourseResponse:
    return CourseResponse.model_validate(course)
