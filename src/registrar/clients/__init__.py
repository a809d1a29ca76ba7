"""HTTP clients for the services the enrollment pipeline depends on."""

from registrar.clients.courses import CourseServiceClient
from registrar.clients.http import RemoteLookupClient, build_http_client
from registrar.clients.students import StudentServiceClient

__all__ = [
    "CourseServiceClient",
    "RemoteLookupClient",
    "StudentServiceClient",
    "build_http_client",
]
