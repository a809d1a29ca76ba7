"""Pydantic schemas for the Enrollment API."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from registrar.models.enums import Semester


class EnrollmentRequest(BaseModel):
    """
    Inbound body for creating or replacing an enrollment.

    Every field is optional at parse time so the ordered request checks can
    report the first missing one with a specific message.
    """

    enrollment_year: int | None = None
    semester: Semester | None = None
    student_id: str | None = None
    course_id: str | None = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EnrollmentResponse(BaseModel):
    """Read-only projection of a stored enrollment."""

    enrollment_id: str
    enrollment_year: int
    semester: Semester
    student_id: str
    student_first_name: str
    student_last_name: str
    course_id: str
    course_number: str
    course_name: str

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        frozen=True,
    )
