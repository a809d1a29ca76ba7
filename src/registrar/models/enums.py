"""
Enums for domain models.
Enums provide type safety and clarity. Validation for categorical fields.
"""

import enum


class Semester(str, enum.Enum):
    """Academic term an enrollment belongs to."""

    FALL = "FALL"
    WINTER = "WINTER"
    SUMMER = "SUMMER"
