# File: src/registrar/services/enrollment_service.py
"""
Enrollment orchestration.

Add and update run the same pipeline:

    validate body -> resolve student -> resolve course -> persist -> project

Steps run strictly in that order and the first failure aborts the call; the
course service is never contacted once the student step has failed, and
nothing is written unless both lookups succeeded. No step is retried.

"Not found" on update, delete and get-by-id is an empty result (None), not an
error; the HTTP layer decides how to report it.
"""

from typing import AsyncIterator

from registrar.core.error_mapper import COURSE, STUDENT
from registrar.core.logging import get_logger
from registrar.core.validation import validate_enrollment_request
from registrar.core.validators import generate_identifier, validate_identifier
from registrar.models.enrollment_schemas import EnrollmentRequest, EnrollmentResponse
from registrar.models.remote import RequestContext
from registrar.ports.enrollment_store import EnrollmentStore
from registrar.ports.lookups import CourseLookup, StudentLookup
from registrar.services.mapper import to_record, to_response

logger = get_logger(__name__)


class EnrollmentService:
    """Enrollment use cases over a store and the two remote lookups.

    Holds no per-call state, so a single instance can serve concurrent requests
    as long as the store it wraps can.
    """

    def __init__(
        self,
        store: EnrollmentStore,
        students: StudentLookup,
        courses: CourseLookup,
    ):
        self._store = store
        self._students = students
        self._courses = courses

    async def add_enrollment(self, request: EnrollmentRequest) -> EnrollmentResponse:
        context = await self._resolve(request)
        record = to_record(context, enrollment_id=generate_identifier())
        saved = await self._store.save(record)
        logger.info(
            "enrollment.created",
            enrollment_id=saved.enrollment_id,
            student_id=saved.student_id,
            course_id=saved.course_id,
        )
        return to_response(saved)

    async def get_all_enrollments(self) -> AsyncIterator[EnrollmentResponse]:
        async for record in self._store.find_all():
            yield to_response(record)

    async def get_enrollment_by_enrollment_id(self, enrollment_id: str) -> EnrollmentResponse | None:
        record = await self._store.find_by_enrollment_id(enrollment_id)
        if record is None:
            logger.info("enrollment.not_found", enrollment_id=enrollment_id)
            return None
        logger.debug("enrollment.found", enrollment_id=record.enrollment_id)
        return to_response(record)

    async def update_enrollment(
        self, request: EnrollmentRequest, enrollment_id: str
    ) -> EnrollmentResponse | None:
        existing = await self._store.find_by_enrollment_id(enrollment_id)
        if existing is None:
            logger.info("enrollment.not_found", enrollment_id=enrollment_id)
            return None

        context = await self._resolve(request)
        record = to_record(
            context,
            enrollment_id=existing.enrollment_id,
            storage_key=existing.id,
        )
        saved = await self._store.save(record)
        logger.info(
            "enrollment.updated",
            enrollment_id=saved.enrollment_id,
            student_id=saved.student_id,
            course_id=saved.course_id,
        )
        return to_response(saved)

    async def delete_enrollment_by_enrollment_id(self, enrollment_id: str) -> EnrollmentResponse | None:
        existing = await self._store.find_by_enrollment_id(enrollment_id)
        if existing is None:
            logger.info("enrollment.not_found", enrollment_id=enrollment_id)
            return None

        # Project before deleting; the row is gone afterwards
        response = to_response(existing)
        await self._store.delete(existing)
        logger.info("enrollment.deleted", enrollment_id=enrollment_id)
        return response

    async def _resolve(self, request: EnrollmentRequest) -> RequestContext:
        validate_enrollment_request(request)
        context = RequestContext(request=request)
        context = await self._resolve_student(context)
        return await self._resolve_course(context)

    async def _resolve_student(self, context: RequestContext) -> RequestContext:
        student_id = validate_identifier(context.request.student_id, STUDENT)
        return context.with_student(await self._students.resolve(student_id))

    async def _resolve_course(self, context: RequestContext) -> RequestContext:
        course_id = validate_identifier(context.request.course_id, COURSE)
        return context.with_course(await self._courses.resolve(course_id))
