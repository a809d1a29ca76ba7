"""Client for the course service."""

from registrar.clients.http import RemoteLookupClient
from registrar.core.error_mapper import COURSE
from registrar.models.remote import RemoteCourse
from registrar.ports.lookups import CourseLookup


class CourseServiceClient(RemoteLookupClient[RemoteCourse], CourseLookup):
    """Resolves courses via ``GET /api/v1/courses/{courseId}``."""

    role = COURSE
    path = "/api/v1/courses"
    record_type = RemoteCourse

    async def resolve(self, course_id: str) -> RemoteCourse:
        return await self._fetch(course_id)
