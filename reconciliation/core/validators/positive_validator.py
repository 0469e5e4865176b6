"""
PositiveNumberValidator - validates counts are strictly positive.
"""

from typing import Any

from ..models.finding import Severity
from .base_validator import BaseValidator, ValidationError, is_absent, to_number


class PositiveNumberValidator(BaseValidator):
    """
    Validates that a numeric field is greater than zero.

    Zero is present (not absent) and fails. Values that are not numbers
    are skipped.

    Parameters:
    - negative_severity: Severity for values below zero (default: high)
    - zero_severity: Severity for exactly zero (default: medium)
    """

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)
        self.negative_severity = Severity(self.parameters.get("negative_severity", Severity.HIGH))
        self.zero_severity = Severity(self.parameters.get("zero_severity", Severity.MEDIUM))

    def validate(self, value: Any, record: dict[str, Any]) -> None:
        if is_absent(value):
            return

        number = to_number(value)
        if number is None or number > 0:
            return

        if number < 0:
            raise ValidationError(
                rule_name="positive",
                field_name=self.field_name,
                message=f"Value {number} is negative",
                severity=self.negative_severity,
            )

        raise ValidationError(
            rule_name="positive",
            field_name=self.field_name,
            message="Value is zero",
            severity=self.zero_severity,
        )

    @property
    def rule_type(self) -> str:
        return "positive"
