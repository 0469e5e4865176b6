"""
RangeValidator - validates numeric values are within a specified range.
"""

from typing import Any

from .base_validator import BaseValidator, ValidationError, is_absent, to_number


class RangeValidator(BaseValidator):
    """
    Validates that a numeric field is within a specified range.

    Parameters:
    - min: Minimum value (inclusive)
    - max: Maximum value (inclusive)
    - zero_is_absent: Treat a numeric 0 as a missing value and skip it (default: False)
    """

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)

        self.min_value = self.parameters.get("min")
        self.max_value = self.parameters.get("max")
        self.zero_is_absent = bool(self.parameters.get("zero_is_absent", False))

        if self.min_value is None and self.max_value is None:
            raise ValueError("RangeValidator requires at least one of: min, max")

        if self.min_value is not None and self.max_value is not None and self.min_value > self.max_value:
            raise ValueError(f"RangeValidator min {self.min_value} exceeds max {self.max_value}")

    def validate(self, value: Any, record: dict[str, Any]) -> None:
        """
        Validate that the value is within the specified range.

        Raises:
            ValidationError: If value is outside the range
        """
        if is_absent(value):
            return

        # Only a numeric 0 is a placeholder; the text "0" is checked like any value
        if self.zero_is_absent and isinstance(value, (int, float)) and not isinstance(value, bool) and value == 0:
            return

        number = to_number(value)
        if number is None:
            return

        if self.min_value is not None and number < self.min_value:
            raise ValidationError(
                rule_name="range",
                field_name=self.field_name,
                message=f"Value {number} is less than minimum {self.min_value}"
            )

        if self.max_value is not None and number > self.max_value:
            raise ValidationError(
                rule_name="range",
                field_name=self.field_name,
                message=f"Value {number} exceeds maximum {self.max_value}"
            )

    @property
    def rule_type(self) -> str:
        return "range"
