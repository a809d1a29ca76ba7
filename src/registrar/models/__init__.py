"""Domain models package."""

from registrar.models.course import Course
from registrar.models.course_schemas import CourseRequest, CourseResponse
from registrar.models.enrollment import Enrollment
from registrar.models.enrollment_schemas import EnrollmentRequest, EnrollmentResponse
from registrar.models.enums import Semester
from registrar.models.remote import RemoteCourse, RemoteStudent, RequestContext

__all__ = [
    "Course",
    "CourseRequest",
    "CourseResponse",
    "Enrollment",
    "EnrollmentRequest",
    "EnrollmentResponse",
    "RemoteCourse",
    "RemoteStudent",
    "RequestContext",
    "Semester",
]
