"""
Base validator interface for all validation rules.

All validators must inherit from BaseValidator and implement the validate() method.
"""

import math
from abc import ABC, abstractmethod
from typing import Any

from ..models.finding import Severity


class ValidationError(Exception):
    """
    Raised when a validation rule fails.

    A validator may set severity to override the severity configured on the
    rule (e.g. a negative headcount is more urgent than a zero one).
    """

    def __init__(
        self,
        rule_name: str,
        field_name: str,
        message: str,
        severity: Severity | None = None,
    ):
        self.rule_name = rule_name
        self.field_name = field_name
        self.message = message
        self.severity = severity
        super().__init__(f"[{rule_name}] {field_name}: {message}")


def is_missing(value: Any) -> bool:
    """None, the empty string and NaN count as a missing field."""
    if value is None or value == "":
        return True
    return isinstance(value, float) and math.isnan(value)


def is_absent(value: Any) -> bool:
    """
    Like is_missing, but whitespace-only strings also count as missing.

    Used by the numeric rules, where a blank cell carries no number to check.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, float):
        return math.isnan(value)
    return False


def to_number(value: Any) -> int | float | None:
    """
    Read a numeric field value, accepting numeric strings.

    Returns None for anything that is not a number (booleans included).
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return None if isinstance(value, float) and math.isnan(value) else value
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
        if math.isnan(number):
            return None
        return int(number) if number.is_integer() else number
    return None


class BaseValidator(ABC):
    """
    Abstract base class for all validators.

    Each validator implements a specific validation rule type
    (calendar_date, positive, range).
    """

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        """
        Initialize validator.

        Args:
            field_name: Name of the field to validate
            parameters: Rule-specific parameters (e.g., min/max for range)
        """
        self.field_name = field_name
        self.parameters = parameters or {}

    @abstractmethod
    def validate(self, value: Any, record: dict[str, Any]) -> None:
        """
        Validate a value against this rule.

        Absent values are not applicable and must pass silently.

        Args:
            value: The field value to validate
            record: The entire record (for context-dependent validation)

        Raises:
            ValidationError: If validation fails
        """
        pass

    @property
    @abstractmethod
    def rule_type(self) -> str:
        """Return the rule type identifier."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(field={self.field_name}, params={self.parameters})"
