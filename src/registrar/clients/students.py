"""Client for the student service."""

from registrar.clients.http import RemoteLookupClient
from registrar.core.error_mapper import STUDENT
from registrar.models.remote import RemoteStudent
from registrar.ports.lookups import StudentLookup


class StudentServiceClient(RemoteLookupClient[RemoteStudent], StudentLookup):
    """Resolves students via ``GET /api/v1/students/{studentId}``."""

    role = STUDENT
    path = "/api/v1/students"
    record_type = RemoteStudent

    async def resolve(self, student_id: str) -> RemoteStudent:
        return await self._fetch(student_id)
