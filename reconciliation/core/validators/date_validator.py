"""
CalendarDateValidator - validates date text is a real calendar date.
"""

import re
from datetime import date
from re import Pattern
from typing import Any

from .base_validator import BaseValidator, ValidationError, is_missing

DEFAULT_DATE_PATTERN = r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"


class CalendarDateValidator(BaseValidator):
    """
    Validates that a field holds a YYYY-MM-DD date that exists on the calendar.

    The whole value must match the pattern (no surrounding text, no trailing
    newline), and year/month/day must build a date that reads back the same,
    so "2024-13-25" and "2024-02-30" both fail.

    Parameters:
    - pattern: Regex with named groups year, month, day
    """

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)

        pattern = self.parameters.get("pattern", DEFAULT_DATE_PATTERN)
        try:
            self.pattern: Pattern = re.compile(pattern) if isinstance(pattern, str) else pattern
        except re.error as e:
            raise ValueError(f"Invalid date pattern: {e}")

        missing = {"year", "month", "day"} - set(self.pattern.groupindex)
        if missing:
            raise ValueError(f"Date pattern must define groups: {', '.join(sorted(missing))}")

    def validate(self, value: Any, record: dict[str, Any]) -> None:
        """
        Validate that the value is a calendar date.

        Raises:
            ValidationError: If the text or the date itself is invalid
        """
        # Whitespace-only text is present and gets checked
        if is_missing(value):
            return

        value_str = value if isinstance(value, str) else str(value)

        match = self.pattern.fullmatch(value_str)
        if not match:
            raise ValidationError(
                rule_name="calendar_date",
                field_name=self.field_name,
                message=f"Value '{value_str}' does not match pattern '{self.pattern.pattern}'"
            )

        year, month, day = (int(match.group(part)) for part in ("year", "month", "day"))
        # date() rejects out-of-range components instead of rolling them over
        try:
            date(year, month, day)
        except ValueError as e:
            raise ValidationError(
                rule_name="calendar_date",
                field_name=self.field_name,
                message=f"Value '{value_str}' is not a calendar date: {e}"
            )

    @property
    def rule_type(self) -> str:
        return "calendar_date"
