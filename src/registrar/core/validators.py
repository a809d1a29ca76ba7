# File: src/registrar/core/validators.py
"""Identifier format checks shared by the services and the HTTP boundary."""

import re
import uuid

from registrar.core.errors import InvalidIdentifierError

IDENTIFIER_LENGTH = 36

# 128-bit token as 8-4-4-4-12 hex groups
_CANONICAL_ID = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


def is_canonical_identifier(value: object) -> bool:
    """True if ``value`` is a 36-character, dash-separated 128-bit token."""
    return isinstance(value, str) and _CANONICAL_ID.fullmatch(value) is not None


def validate_identifier(value: str, role: str) -> str:
    """
    Validate an externally supplied identifier.

    Args:
        value: Identifier to check
        role: "Student", "Course" or "Enrollment", used in the error message

    Returns:
        The identifier, unchanged

    Raises:
        InvalidIdentifierError: If the identifier is not in canonical form
    """
    if not is_canonical_identifier(value):
        raise InvalidIdentifierError(role, str(value))
    return value


def has_identifier_length(value: str) -> bool:
    """Cheap shape guard applied to path parameters before the services run."""
    return len(value) == IDENTIFIER_LENGTH


def generate_identifier() -> str:
    return str(uuid.uuid4())
