"""UTC datetime helpers for persisted timestamps."""

from datetime import datetime, timezone


def now_utc_naive() -> datetime:
    """Current UTC time without tzinfo; timestamp columns are stored naive."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
