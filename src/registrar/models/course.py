"""Course model for the course catalogue service."""

from datetime import datetime

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from registrar.core.db import Base
from registrar.core.validators import generate_identifier
from registrar.utils.datetime import now_utc_naive


class Course(Base):
    """A course offered by the institution, keyed publicly by ``course_id``."""

    __tablename__ = "courses"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=generate_identifier,
    )

    course_id: Mapped[str] = mapped_column(
        String(36),
        nullable=False,
        unique=True,
        index=True,
    )

    course_number: Mapped[str] = mapped_column(String(50), nullable=False)
    course_name: Mapped[str] = mapped_column(String(200), nullable=False)
    num_hours: Mapped[int] = mapped_column(Integer, nullable=False)
    num_credits: Mapped[float] = mapped_column(Float, nullable=False)
    department: Mapped[str | None] = mapped_column(String(100), nullable=True)

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
        return f"<Course(course_id={self.course_id}, number={self.course_number})>"
