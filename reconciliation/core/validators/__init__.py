"""
Validation rule implementations.

Provides validators for calendar dates, positive counts and numeric ranges.
"""

from .base_validator import BaseValidator, ValidationError, is_absent, is_missing, to_number
from .date_validator import CalendarDateValidator
from .positive_validator import PositiveNumberValidator
from .range_validator import RangeValidator

__all__ = [
    "BaseValidator",
    "ValidationError",
    "CalendarDateValidator",
    "PositiveNumberValidator",
    "RangeValidator",
    "is_absent",
    "is_missing",
    "to_number",
]
