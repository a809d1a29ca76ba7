# File: src/registrar/models/enrollment.py
"""Enrollment model: a student's registration in a course for one term."""

from datetime import datetime

from sqlalchemy import Enum as SQLEnum
from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from registrar.core.db import Base
from registrar.core.validators import generate_identifier
from registrar.models.enums import Semester
from registrar.utils.datetime import now_utc_naive


class Enrollment(Base):
    """
    Persisted enrollment record.

    Student and course fields are denormalized snapshots taken from the
    remote services when the enrollment was created or last updated, so reads
    never call out to those services.

    ``id`` is the storage key; ``enrollment_id`` is the public identifier.
    Both are assigned once and survive updates.
    """

    __tablename__ = "enrollments"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=generate_identifier,
    )

    enrollment_id: Mapped[str] = mapped_column(
        String(36),
        nullable=False,
        unique=True,
        index=True,
    )

    enrollment_year: Mapped[int] = mapped_column(Integer, nullable=False)

    semester: Mapped[Semester] = mapped_column(
        SQLEnum(Semester, name="semester"),
        nullable=False,
    )

    # Student snapshot
    student_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    student_first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    student_last_name: Mapped[str] = mapped_column(String(100), nullable=False)

    # Course snapshot
    course_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    course_number: Mapped[str] = mapped_column(String(50), nullable=False)
    course_name: Mapped[str] = mapped_column(String(200), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        nullable=False,
        default=now_utc_naive,
    )

    updated_at: Mapped[datetime] = mapped_column(
        nullable=False,
        default=now_utc_naive,
        onupdate=now_utc_naive,
    )

    def __repr__(self) -> str:
        return (
            f"<Enrollment(enrollment_id={self.enrollment_id}, student_id={self.student_id}, "
            f"course_id={self.course_id}, semester={self.semester})>"
        )
