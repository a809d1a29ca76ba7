"""Application services."""

from registrar.services.course_service import CourseService
from registrar.services.enrollment_service import EnrollmentService

__all__ = ["CourseService", "EnrollmentService"]
