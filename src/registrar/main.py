# File: src/registrar/main.py
"""FastAPI application factory for the course and enrollment services."""

from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI

from registrar.core.config import Settings, get_settings
from registrar.core.logging import configure_logging, get_logger

configure_logging()
logger = get_logger(__name__)


def _build_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Own the database engine and the upstream HTTP clients for the app's lifetime."""
        from registrar.api.health import set_app_start_time
        from registrar.clients import CourseServiceClient, StudentServiceClient, build_http_client
        from registrar.core.db import build_engine, build_sessionmaker
        from registrar.core.sentry import init_sentry

        start_time = datetime.now()
        set_app_start_time(start_time)
        init_sentry(settings)

        engine = build_engine(settings)
        student_http = build_http_client(settings.student_service_url, settings.remote_timeout_seconds)
        course_http = build_http_client(settings.course_service_url, settings.remote_timeout_seconds)

        app.state.engine = engine
        app.state.sessionmaker = build_sessionmaker(engine)
        app.state.student_lookup = StudentServiceClient(student_http)
        app.state.course_lookup = CourseServiceClient(course_http)

        logger.info(
            "app.startup",
            environment=settings.environment,
            student_service_url=settings.student_service_url,
            course_service_url=settings.course_service_url,
            timestamp=start_time.isoformat(),
        )
        try:
            yield
        finally:
            await student_http.aclose()
            await course_http.aclose()
            await engine.dispose()
            logger.info("app.shutdown", message="Registrar shutting down gracefully")

    return lifespan


def _setup_middleware(app: FastAPI) -> None:
    """Configure all middleware in correct order."""
    # Last added = first executed, so RequestIDMiddleware goes last
    from registrar.middleware.logging import RequestIDMiddleware
    from registrar.middleware.sentry import SentryContextMiddleware

    app.add_middleware(SentryContextMiddleware)
    app.add_middleware(RequestIDMiddleware)


def _register_routers(app: FastAPI) -> None:
    """Register all API routers."""
    from registrar.api.courses import router as courses_router
    from registrar.api.enrollments import router as enrollments_router
    from registrar.api.health import router as health_router

    app.include_router(health_router)
    app.include_router(courses_router)
    app.include_router(enrollments_router)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Application factory."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Registrar API",
        description="Course catalogue and student enrollment services",
        version="0.1.0",
        lifespan=_build_lifespan(settings),
    )
    app.state.settings = settings

    from registrar.core.exception_handlers import register_exception_handlers

    register_exception_handlers(app)
    _setup_middleware(app)
    _register_routers(app)

    logger.info("app.configured", message="FastAPI application created successfully")

    return app


def run() -> None:
    """Development server entrypoint."""
    uvicorn.run(
        "registrar.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
