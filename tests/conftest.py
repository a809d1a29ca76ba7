# File: tests/conftest.py
"""Pytest configuration and fixtures."""

import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from registrar.api.dependencies import get_course_lookup, get_student_lookup
from registrar.core.config import Settings
from registrar.core.db import Base, get_db
from registrar.main import create_app

# Import all models
from registrar.models.course import Course  # noqa: F401
from registrar.models.enrollment import Enrollment  # noqa: F401
from tests.factories import FakeCourseLookup, FakeStudentLookup, make_course, make_student

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


def _engine_kwargs(url: str) -> dict:
    # One shared connection, otherwise every checkout sees a fresh empty in-memory database
    if url.startswith("sqlite"):
        return {"poolclass": StaticPool}
    return {}


@pytest_asyncio.fixture(scope="function")
async def db_session():
    """Create fresh DB session for each test."""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, **_engine_kwargs(TEST_DATABASE_URL))
    async_session_maker = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session_maker() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def student():
    return make_student()


@pytest.fixture
def course():
    return make_course()


@pytest.fixture
def student_lookup(student) -> FakeStudentLookup:
    return FakeStudentLookup(student)


@pytest.fixture
def course_lookup(course) -> FakeCourseLookup:
    return FakeCourseLookup(course)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(environment="test", database_url=TEST_DATABASE_URL)


@pytest_asyncio.fixture
async def client(db_session, student_lookup, course_lookup, test_settings):
    """Create async test client with overridden DB and remote lookup dependencies."""
    app = create_app(test_settings)

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_student_lookup] = lambda: student_lookup
    app.dependency_overrides[get_course_lookup] = lambda: course_lookup

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        ac.db_session = db_session
        yield ac
