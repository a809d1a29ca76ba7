"""
Liveness endpoint for the registrar services.

Probes hit ``/health``; it answers 200 even when the database is unreachable
and reports the outage in the body instead.
"""

import time
from datetime import datetime
from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from registrar.core.db import get_db

router = APIRouter(tags=["health"])

_started_at: datetime | None = None


def set_app_start_time(start_time: datetime) -> None:
    global _started_at
    _started_at = start_time


def get_uptime_seconds() -> int:
    if _started_at is None:
        return 0
    return int((datetime.now() - _started_at).total_seconds())


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)


async def check_database(db: AsyncSession) -> dict[str, Any]:
    """Run ``SELECT 1`` and report ``ok`` or ``down`` with the round-trip time."""
    started = time.perf_counter()
    try:
        await db.execute(text("SELECT 1"))
    except Exception as exc:
        return {"status": "down", "response_time_ms": _elapsed_ms(started), "error": type(exc).__name__}
    return {"status": "ok", "response_time_ms": _elapsed_ms(started)}


@router.get("/health", summary="Health check")
async def health_check(db: AsyncSession = Depends(get_db)) -> dict[str, Any]:
    """Overall status is ``degraded`` as soon as one dependency is down."""
    checks = {"database": await check_database(db)}
    healthy = all(check["status"] == "ok" for check in checks.values())
    return {
        "status": "ok" if healthy else "degraded",
        "uptime_seconds": get_uptime_seconds(),
        "checks": checks,
    }
