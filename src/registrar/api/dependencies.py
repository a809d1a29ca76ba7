"""FastAPI dependencies wiring services to their collaborators."""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from registrar.core.db import get_db
from registrar.ports.enrollment_store import EnrollmentStore
from registrar.ports.lookups import CourseLookup, StudentLookup
from registrar.repositories.enrollment_repository import SqlAlchemyEnrollmentStore
from registrar.services.course_service import CourseService
from registrar.services.enrollment_service import EnrollmentService


def get_student_lookup(request: Request) -> StudentLookup:
    """Shared student client created in the app lifespan."""
    return request.app.state.student_lookup


def get_course_lookup(request: Request) -> CourseLookup:
    """Shared course client created in the app lifespan."""
    return request.app.state.course_lookup


def get_enrollment_store(db: AsyncSession = Depends(get_db)) -> EnrollmentStore:
    return SqlAlchemyEnrollmentStore(db)


def get_enrollment_service(
    store: EnrollmentStore = Depends(get_enrollment_store),
    students: StudentLookup = Depends(get_student_lookup),
    courses: CourseLookup = Depends(get_course_lookup),
) -> EnrollmentService:
    return EnrollmentService(store, students, courses)


def get_course_service(db: AsyncSession = Depends(get_db)) -> CourseService:
    return CourseService(db)
