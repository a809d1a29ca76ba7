"""Tests for identifier and request body validation."""

from datetime import date

import pytest

from registrar.core.errors import ErrorKind, InvalidIdentifierError, InvalidRequestError
from registrar.core.validation import (
    max_enrollment_year,
    run_checks,
    validate_course_request,
    validate_enrollment_request,
)
from registrar.core.validators import (
    generate_identifier,
    has_identifier_length,
    is_canonical_identifier,
    validate_identifier,
)
from registrar.models.course_schemas import CourseRequest
from registrar.models.enrollment_schemas import EnrollmentRequest
from registrar.models.enums import Semester

VALID_ID = "61b546c1-7ebb-48d3-aeaa-1015509ae190"


class TestIdentifierValidator:
    @pytest.mark.parametrize(
        "value",
        [VALID_ID, VALID_ID.upper(), "00000000-0000-0000-0000-000000000000"],
    )
    def test_accepts_canonical_identifiers(self, value):
        assert is_canonical_identifier(value)
        assert validate_identifier(value, "Student") == value

    @pytest.mark.parametrize(
        "value",
        [
            "This-Is-An-Invalid-UUID",
            "This-Is-An-Invalid-UUID-Format-12345",  # 36 chars, wrong shape
            VALID_ID.replace("-", ""),
            VALID_ID + "0",
            "g1b546c1-7ebb-48d3-aeaa-1015509ae190",
            "",
            None,
        ],
    )
    def test_rejects_non_canonical_identifiers(self, value):
        assert not is_canonical_identifier(value)

    def test_rejection_names_role_and_identifier(self):
        with pytest.raises(InvalidIdentifierError) as exc_info:
            validate_identifier("bad-id", "Course")

        exc = exc_info.value
        assert exc.kind == ErrorKind.INVALID_IDENTIFIER_FORMAT
        assert exc.status_code == 422
        assert exc.message == "Course id=bad-id is invalid"
        assert exc.details == {"resource": "Course", "resource_id": "bad-id"}

    def test_generated_identifiers_are_canonical(self):
        assert is_canonical_identifier(generate_identifier())

    def test_length_guard(self):
        assert has_identifier_length(VALID_ID)
        assert not has_identifier_length("short")


class TestEnrollmentRequestChecks:
    def _request(self, **overrides) -> EnrollmentRequest:
        fields = dict(enrollment_year=2010, semester=Semester.FALL, student_id=VALID_ID, course_id=VALID_ID)
        fields.update(overrides)
        return EnrollmentRequest(**fields)

    def test_valid_request_passes_through(self):
        request = self._request()
        assert validate_enrollment_request(request) is request

    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"student_id": None}, "Student id is required"),
            ({"student_id": "   "}, "Student id is required"),
            ({"course_id": ""}, "Course id is required"),
            ({"semester": None}, "Semester is required"),
        ],
    )
    def test_missing_fields(self, overrides, message):
        with pytest.raises(InvalidRequestError) as exc_info:
            validate_enrollment_request(self._request(**overrides))

        assert exc_info.value.message == message
        assert exc_info.value.kind == ErrorKind.INVALID_REQUEST_SHAPE

    @pytest.mark.parametrize("year", [None, 1999, date.today().year + 2])
    def test_enrollment_year_out_of_range(self, year):
        with pytest.raises(InvalidRequestError) as exc_info:
            validate_enrollment_request(self._request(enrollment_year=year))

        assert exc_info.value.details["field"] == "enrollmentYear"

    @pytest.mark.parametrize("year", [2000, date.today().year, date.today().year + 1])
    def test_enrollment_year_bounds_are_inclusive(self, year):
        validate_enrollment_request(self._request(enrollment_year=year))
        assert max_enrollment_year() == date.today().year + 1

    def test_first_failing_check_wins(self):
        request = self._request(student_id=None, course_id=None, semester=None, enrollment_year=None)

        with pytest.raises(InvalidRequestError) as exc_info:
            validate_enrollment_request(request)

        assert exc_info.value.message == "Student id is required"


class TestRunChecks:
    def test_later_checks_are_not_evaluated(self):
        evaluated = []

        def record(name, result):
            def predicate(_):
                evaluated.append(name)
                return result
            return predicate

        checks = [
            (record("first", True), lambda _: InvalidRequestError("first")),
            (record("second", False), lambda _: InvalidRequestError("second")),
            (record("third", False), lambda _: InvalidRequestError("third")),
        ]

        with pytest.raises(InvalidRequestError, match="second"):
            run_checks(object(), checks)

        assert evaluated == ["first", "second"]


class TestCourseRequestChecks:
    def _request(self, **overrides) -> CourseRequest:
        fields = dict(
            course_number="cat-123",
            course_name="Web Services Testing",
            num_hours=45,
            num_credits=5.0,
            department="Computer Science",
        )
        fields.update(overrides)
        return CourseRequest(**fields)

    def test_valid_course_passes(self):
        validate_course_request(self._request())

    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"course_number": None}, "Course number is required"),
            ({"course_name": None}, "Course name is required"),
            ({"num_credits": 0.0}, "Course credits must be greater than 0"),
            ({"num_hours": -10}, "Course hours must be greater than 0"),
        ],
    )
    def test_invalid_course(self, overrides, message):
        with pytest.raises(InvalidRequestError, match=message):
            validate_course_request(self._request(**overrides))
