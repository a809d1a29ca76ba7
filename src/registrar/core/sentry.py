"""Sentry error tracking configuration and initialization."""

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration
from sentry_sdk.utils import BadDsn

from registrar.core.config import Settings
from registrar.core.logging import get_logger

logger = get_logger(__name__)

# Guard against multiple initializations
_sentry_initialized = False

# Remote identifiers are fine to report; names copied from the student service are not
_SENSITIVE_KEYS = ("first_name", "last_name", "firstname", "lastname")


def init_sentry(settings: Settings) -> bool:
    """
    Initialize Sentry SDK for error tracking.

    Only initializes if a DSN is configured and looks like a real http(s) DSN,
    so local development and CI run without Sentry. Returns True when Sentry
    is active after the call.
    """
    global _sentry_initialized

    if _sentry_initialized:
        return True

    sentry_dsn = (settings.sentry_dsn or "").strip()
    if not sentry_dsn:
        logger.info("sentry.disabled", message="Sentry DSN not found, error tracking disabled")
        return False

    # Catches placeholder values like "xxx" that might be set in CI
    if not sentry_dsn.startswith(("https://", "http://")):
        logger.info(
            "sentry.disabled",
            message="Sentry DSN appears to be invalid or placeholder, error tracking disabled",
        )
        return False

    try:
        sentry_sdk.init(
            dsn=sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.0,
            send_default_pii=False,
            integrations=[
                FastApiIntegration(transaction_style="endpoint"),
                LoggingIntegration(level=None, event_level=None),  # structlog already logs
            ],
            before_send=filter_sensitive_data,
        )
    except BadDsn as exc:
        logger.warning(
            "sentry.init_failed",
            message="Failed to initialize Sentry due to invalid DSN, error tracking disabled",
            error=str(exc),
        )
        return False

    _sentry_initialized = True
    logger.info("sentry.initialized", environment=settings.environment)
    return True


def filter_sensitive_data(event: dict, hint: dict) -> dict:
    """Drop student names from the ``extra`` payload before an event leaves the process."""
    extra = event.get("extra")
    if isinstance(extra, dict):
        event["extra"] = {
            key: value for key, value in extra.items() if not _is_sensitive(str(key))
        }
    return event


def _is_sensitive(key: str) -> bool:
    normalized = key.replace("Name", "_name").lower()
    return any(marker in normalized for marker in _SENSITIVE_KEYS)
