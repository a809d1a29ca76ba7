"""Tests for the student and course service clients."""

import httpx
import pytest

from registrar.clients import CourseServiceClient, StudentServiceClient, build_http_client
from registrar.core.errors import (
    CourseNotFoundError,
    ErrorKind,
    InvalidIdentifierError,
    StudentNotFoundError,
    UpstreamUnavailableError,
)

STUDENT_ID = "c3540a89-cb47-4c96-888e-ff96708db4d8"
COURSE_ID = "9a29fff7-564a-4cc9-8fe1-36f6ca9bc223"


def _client(client_cls, handler):
    http = httpx.AsyncClient(base_url="http://upstream", transport=httpx.MockTransport(handler))
    return client_cls(http), http


class TestStudentServiceClient:
    @pytest.mark.asyncio
    async def test_resolves_student_from_camel_case_payload(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.path)
            return httpx.Response(
                200,
                json={
                    "studentId": STUDENT_ID,
                    "firstName": "Jeremy",
                    "lastName": "Misola-Rellin",
                    "program": "Computer Science",
                    "stuff": "Stuff",
                    "extraField": "ignored",
                },
            )

        client, http = _client(StudentServiceClient, handler)
        async with http:
            student = await client.resolve(STUDENT_ID)

        assert seen == [f"/api/v1/students/{STUDENT_ID}"]
        assert student.student_id == STUDENT_ID
        assert student.first_name == "Jeremy"
        assert student.last_name == "Misola-Rellin"

    @pytest.mark.asyncio
    async def test_404_is_student_not_found(self):
        client, http = _client(StudentServiceClient, lambda request: httpx.Response(404))
        async with http:
            with pytest.raises(StudentNotFoundError) as exc_info:
                await client.resolve(STUDENT_ID)

        assert exc_info.value.message == f"Student with id={STUDENT_ID} is not found"

    @pytest.mark.asyncio
    async def test_422_is_invalid_student_id(self):
        client, http = _client(StudentServiceClient, lambda request: httpx.Response(422))
        async with http:
            with pytest.raises(InvalidIdentifierError) as exc_info:
                await client.resolve(STUDENT_ID)

        assert exc_info.value.message == f"Student id={STUDENT_ID} is invalid"

    @pytest.mark.asyncio
    async def test_connection_error_is_unavailable(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client, http = _client(StudentServiceClient, handler)
        async with http:
            with pytest.raises(UpstreamUnavailableError) as exc_info:
                await client.resolve(STUDENT_ID)

        assert exc_info.value.kind == ErrorKind.UPSTREAM_UNAVAILABLE
        assert exc_info.value.details["reason"] == "ConnectError"

    @pytest.mark.asyncio
    async def test_timeout_is_unavailable_and_not_retried(self):
        attempts = []

        def handler(request: httpx.Request) -> httpx.Response:
            attempts.append(request)
            raise httpx.ReadTimeout("timed out", request=request)

        client, http = _client(StudentServiceClient, handler)
        async with http:
            with pytest.raises(UpstreamUnavailableError):
                await client.resolve(STUDENT_ID)

        assert len(attempts) == 1


class TestCourseServiceClient:
    @pytest.mark.asyncio
    async def test_resolves_course(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == f"/api/v1/courses/{COURSE_ID}"
            return httpx.Response(
                200,
                json={
                    "courseId": COURSE_ID,
                    "courseNumber": "ENG-690",
                    "courseName": "English",
                    "numHours": 10,
                    "numCredits": 10.5,
                    "department": "Eng",
                },
            )

        client, http = _client(CourseServiceClient, handler)
        async with http:
            course = await client.resolve(COURSE_ID)

        assert (course.course_id, course.course_number, course.course_name) == (
            COURSE_ID,
            "ENG-690",
            "English",
        )

    @pytest.mark.asyncio
    async def test_404_is_course_not_found(self):
        client, http = _client(CourseServiceClient, lambda request: httpx.Response(404))
        async with http:
            with pytest.raises(CourseNotFoundError):
                await client.resolve(COURSE_ID)

    @pytest.mark.asyncio
    async def test_400_is_invalid_course_id(self):
        client, http = _client(CourseServiceClient, lambda request: httpx.Response(400))
        async with http:
            with pytest.raises(InvalidIdentifierError, match="Course id="):
                await client.resolve(COURSE_ID)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [500, 502, 503, 401])
    async def test_other_statuses_are_unavailable(self, status_code):
        client, http = _client(CourseServiceClient, lambda request: httpx.Response(status_code))
        async with http:
            with pytest.raises(UpstreamUnavailableError) as exc_info:
                await client.resolve(COURSE_ID)

        assert exc_info.value.details["reason"] == f"HTTP {status_code}"

    @pytest.mark.asyncio
    async def test_malformed_body_is_unavailable(self):
        client, http = _client(
            CourseServiceClient, lambda request: httpx.Response(200, json={"courseId": COURSE_ID})
        )
        async with http:
            with pytest.raises(UpstreamUnavailableError):
                await client.resolve(COURSE_ID)

    @pytest.mark.asyncio
    async def test_identifier_is_escaped_into_path(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.raw_path)
            return httpx.Response(404)

        client, http = _client(CourseServiceClient, handler)
        async with http:
            with pytest.raises(CourseNotFoundError):
                await client.resolve("a/b")

        assert seen == [b"/api/v1/courses/a%2Fb"]


@pytest.mark.asyncio
async def test_build_http_client_applies_base_url_and_timeout():
    async with build_http_client("http://students:7001", 2.5) as http:
        assert http.base_url.host == "students"
        assert http.base_url.port == 7001
        assert http.timeout.read == 2.5
