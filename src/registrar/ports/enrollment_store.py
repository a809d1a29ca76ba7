"""
Enrollment store port.

Single-record writes are atomic; there are no multi-record transactions.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import AsyncIterator

from registrar.models.enrollment import Enrollment


class EnrollmentStore(ABC):
    @abstractmethod
    async def save(self, record: Enrollment) -> Enrollment:
        """Insert or overwrite ``record``. Raises PersistenceConflictError on a duplicate key."""

    @abstractmethod
    async def find_by_enrollment_id(self, enrollment_id: str) -> Enrollment | None:
        """Return the record, or None when absent."""

    @abstractmethod
    async def delete(self, record: Enrollment) -> None:
        pass

    @abstractmethod
    def find_all(self) -> AsyncIterator[Enrollment]:
        """Yield every stored record lazily, in store iteration order."""

    @abstractmethod
    async def count(self) -> int:
        pass
