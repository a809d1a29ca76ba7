"""Tests for record assembly and response projection."""

import pytest

from registrar.models.enums import Semester
from registrar.models.remote import RequestContext
from registrar.services.mapper import to_record, to_response
from tests.factories import make_course, make_request, make_student


class TestRecordRoundTrip:
    @pytest.mark.parametrize("semester", list(Semester))
    def test_response_recovers_request_and_resolved_fields(self, semester):
        student = make_student(first_name="Daanyal", last_name="Khan")
        course = make_course(course_number="WEB-420", course_name="Web Services")
        request = make_request(student.student_id, course.course_id, enrollment_year=2021, semester=semester)
        context = RequestContext(request).with_student(student).with_course(course)

        response = to_response(to_record(context, enrollment_id="e" * 36))

        assert response.enrollment_id == "e" * 36
        assert response.enrollment_year == 2021
        assert response.semester == semester
        assert (response.student_id, response.student_first_name, response.student_last_name) == (
            student.student_id,
            "Daanyal",
            "Khan",
        )
        assert (response.course_id, response.course_number, response.course_name) == (
            course.course_id,
            "WEB-420",
            "Web Services",
        )

    def test_storage_key_is_carried_only_when_given(self):
        student, course = make_student(), make_course()
        context = RequestContext(make_request(student.student_id, course.course_id)).with_student(student).with_course(course)

        assert to_record(context, enrollment_id="x").id is None
        assert to_record(context, enrollment_id="x", storage_key="key-1").id == "key-1"

    def test_unresolved_context_is_rejected(self):
        student = make_student()
        context = RequestContext(make_request(student.student_id, "c")).with_student(student)

        with pytest.raises(ValueError):
            to_record(context, enrollment_id="x")


class TestRequestContext:
    def test_each_step_returns_a_new_context(self):
        student, course = make_student(), make_course()
        initial = RequestContext(make_request(student.student_id, course.course_id))

        with_student = initial.with_student(student)
        resolved = with_student.with_course(course)

        assert initial.student is None and initial.course is None
        assert with_student.course is None
        assert resolved.is_resolved
        assert resolved.request is initial.request
