"""
Remote lookup ports.

The enrollment service only talks to the student and course services through
these interfaces. Implementations must be safe to share between concurrent
requests and must not keep per-call state.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from registrar.models.remote import RemoteCourse, RemoteStudent


class StudentLookup(ABC):
    @abstractmethod
    async def resolve(self, student_id: str) -> RemoteStudent:
        """
        Fetch a student by id.

        Raises StudentNotFoundError, InvalidIdentifierError or
        UpstreamUnavailableError. Makes exactly one attempt.
        """


class CourseLookup(ABC):
    @abstractmethod
    async def resolve(self, course_id: str) -> RemoteCourse:
        """
        Fetch a course by id.

        Raises CourseNotFoundError, InvalidIdentifierError or
        UpstreamUnavailableError. Makes exactly one attempt.
        """
