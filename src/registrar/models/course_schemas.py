"""Pydantic schemas for the Course API."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CourseRequest(BaseModel):
    """Inbound body for creating or replacing a course."""

    course_number: str | None = None
    course_name: str | None = None
    num_hours: int | None = None
    num_credits: float | None = None
    department: str | None = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CourseResponse(BaseModel):
    """Schema for reading a course."""

    course_id: str
    course_number: str
    course_name: str
    num_hours: int
    num_credits: float
    department: str | None = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
