"""Environment-driven settings for the registrar services."""

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_DATABASE_URL = "postgresql+asyncpg://registrar:dev_password_change_in_prod@db:5432/registrar_dev"

MIN_ENROLLMENT_YEAR = 2000


def normalize_database_url(url: str) -> str:
    """Rewrite plain postgres DSNs to the asyncpg driver."""
    # Hosting platforms hand out postgres:// or postgresql:// but asyncpg needs postgresql+asyncpg://
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+asyncpg://", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if not url:
        return DEFAULT_DATABASE_URL
    return url


@dataclass(frozen=True)
class Settings:
    """Runtime configuration, resolved once per process."""

    database_url: str = DEFAULT_DATABASE_URL
    environment: str = "development"
    student_service_url: str = "http://localhost:7001"
    course_service_url: str = "http://localhost:7002"
    remote_timeout_seconds: float = 5.0
    sentry_dsn: str | None = None
    min_enrollment_year: int = MIN_ENROLLMENT_YEAR

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            database_url=normalize_database_url(os.getenv("DATABASE_URL", "")),
            environment=os.getenv("ENVIRONMENT", "development"),
            student_service_url=os.getenv("STUDENT_SERVICE_URL", "http://localhost:7001").rstrip("/"),
            course_service_url=os.getenv("COURSE_SERVICE_URL", "http://localhost:7002").rstrip("/"),
            remote_timeout_seconds=float(os.getenv("REMOTE_TIMEOUT_SECONDS", "5.0")),
            sentry_dsn=os.getenv("SENTRY_DSN") or None,
        )


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings, read from the environment on first use."""
    return Settings.from_env()
