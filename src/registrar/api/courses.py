"""Course CRUD endpoints."""

from fastapi import APIRouter, Depends, status

from registrar.api.dependencies import get_course_service
from registrar.core.error_mapper import COURSE
from registrar.core.errors import CourseNotFoundError
from registrar.core.validators import validate_identifier
from registrar.models.course_schemas import CourseRequest, CourseResponse
from registrar.services.course_service import CourseService

router = APIRouter(prefix="/api/v1/courses", tags=["courses"])


def _found(course: CourseResponse | None, course_id: str) -> CourseResponse:
    if course is None:
        raise CourseNotFoundError(course_id)
    return course


@router.get("", response_model=list[CourseResponse])
async def get_all_courses(service: CourseService = Depends(get_course_service)):
    return [course async for course in service.get_all_courses()]


@router.get("/{course_id}", response_model=CourseResponse)
async def get_course_by_course_id(
    course_id: str,
    service: CourseService = Depends(get_course_service),
):
    """Get a course. 422 if the id is malformed, 404 if it doesn't exist."""
    validate_identifier(course_id, COURSE)
    return _found(await service.get_course_by_course_id(course_id), course_id)


@router.post("", response_model=CourseResponse, status_code=status.HTTP_201_CREATED)
async def add_course(
    course: CourseRequest,
    service: CourseService = Depends(get_course_service),
):
    return await service.add_course(course)


@router.put("/{course_id}", response_model=CourseResponse)
async def update_course(
    course_id: str,
    course: CourseRequest,
    service: CourseService = Depends(get_course_service),
):
    validate_identifier(course_id, COURSE)
    return _found(await service.update_course(course, course_id), course_id)


@router.delete("/{course_id}", response_model=CourseResponse)
async def delete_course(
    course_id: str,
    service: CourseService = Depends(get_course_service),
):
    validate_identifier(course_id, COURSE)
    return _found(await service.delete_course_by_course_id(course_id), course_id)
