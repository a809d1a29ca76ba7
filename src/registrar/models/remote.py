"""Records owned by remote services, and the per-call pipeline context."""

from dataclasses import dataclass, replace

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from registrar.models.enrollment_schemas import EnrollmentRequest


class RemoteStudent(BaseModel):
    """Student as returned by the student service. Unknown fields are ignored."""

    student_id: str
    first_name: str
    last_name: str
    program: str | None = None
    stuff: str | None = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class RemoteCourse(BaseModel):
    """Course as returned by the course service. Unknown fields are ignored."""

    course_id: str
    course_number: str
    course_name: str
    num_hours: int | None = None
    num_credits: float | None = None
    department: str | None = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


@dataclass(frozen=True)
class RequestContext:
    """
    Values gathered while one enrollment request moves through the pipeline.

    Immutable: each resolution step returns a new context.
    """

    request: EnrollmentRequest
    student: RemoteStudent | None = None
    course: RemoteCourse | None = None

    def with_student(self, student: RemoteStudent) -> "RequestContext":
        return replace(self, student=student)

    def with_course(self, course: RemoteCourse) -> "RequestContext":
        return replace(self, course=course)

    @property
    def is_resolved(self) -> bool:
        return self.student is not None and self.course is not None
