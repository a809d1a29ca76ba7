"""Course catalogue use cases."""

from typing import AsyncIterator

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from registrar.core.logging import get_logger
from registrar.core.validation import validate_course_request
from registrar.core.validators import generate_identifier
from registrar.models.course import Course
from registrar.models.course_schemas import CourseRequest, CourseResponse
from registrar.services.mapper import to_course_response

logger = get_logger(__name__)


class CourseService:
    def __init__(self, db: AsyncSession):
        self._db = db

    async def get_all_courses(self) -> AsyncIterator[CourseResponse]:
        result = await self._db.stream_scalars(select(Course))
        async for course in result:
            yield to_course_response(course)

    async def get_course_by_course_id(self, course_id: str) -> CourseResponse | None:
        course = await self._find(course_id)
        return to_course_response(course) if course else None

    async def add_course(self, request: CourseRequest) -> CourseResponse:
        validate_course_request(request)
        course = Course(
            course_id=generate_identifier(),
            course_number=request.course_number,
            course_name=request.course_name,
            num_hours=request.num_hours,
            num_credits=request.num_credits,
            department=request.department,
        )
        self._db.add(course)
        await self._db.commit()
        await self._db.refresh(course)
        logger.info("course.created", course_id=course.course_id, course_number=course.course_number)
        return to_course_response(course)

    async def update_course(self, request: CourseRequest, course_id: str) -> CourseResponse | None:
        validate_course_request(request)
        course = await self._find(course_id)
        if course is None:
            return None

        course.course_number = request.course_number
        course.course_name = request.course_name
        course.num_hours = request.num_hours
        course.num_credits = request.num_credits
        course.department = request.department
        await self._db.commit()
        await self._db.refresh(course)
        logger.info("course.updated", course_id=course.course_id)
        return to_course_response(course)

    async def delete_course_by_course_id(self, course_id: str) -> CourseResponse | None:
        course = await self._find(course_id)
        if course is None:
            return None

        response = to_course_response(course)
        await self._db.delete(course)
        await self._db.commit()
        logger.info("course.deleted", course_id=course_id)
        return response

    async def _find(self, course_id: str) -> Course | None:
        result = await self._db.execute(select(Course).where(Course.course_id == course_id))
        return result.scalar_one_or_none()
