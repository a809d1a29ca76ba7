"""
SqlAlchemyEnrollmentStore - EnrollmentStore implementation

Backed by an AsyncSession owned by the caller (one session per request).
Every write commits immediately, so each save/delete is atomic on its own.
"""
from __future__ import annotations

from typing import AsyncIterator

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from registrar.core import error_mapper
from registrar.core.logging import get_logger
from registrar.models.enrollment import Enrollment
from registrar.ports.enrollment_store import EnrollmentStore

logger = get_logger(__name__)


class SqlAlchemyEnrollmentStore(EnrollmentStore):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, record: Enrollment) -> Enrollment:
        # merge() inserts new records and overwrites the persistent row when the storage key matches
        try:
            saved = await self._session.merge(record)
            await self._session.commit()
        except IntegrityError as exc:
            await self._session.rollback()
            logger.warning(
                "enrollment.save_conflict",
                enrollment_id=record.enrollment_id,
            )
            raise error_mapper.from_integrity_error(exc, record.enrollment_id) from exc
        return saved

    async def find_by_enrollment_id(self, enrollment_id: str) -> Enrollment | None:
        stmt = select(Enrollment).where(Enrollment.enrollment_id == enrollment_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete(self, record: Enrollment) -> None:
        await self._session.delete(record)
        await self._session.commit()

    async def find_all(self) -> AsyncIterator[Enrollment]:
        result = await self._session.stream_scalars(select(Enrollment))
        async for record in result:
            yield record

    async def count(self) -> int:
        result = await self._session.execute(select(func.count()).select_from(Enrollment))
        return result.scalar_one()
