"""
ValidationRule model representing one configured check in the rule battery.
"""

from typing import Any, Dict, Literal

from pydantic import BaseModel, Field, field_validator

from .finding import Severity


class ValidationRule(BaseModel):
    """
    A configurable check applied to one field of every record.

    Attributes:
        rule_name: Human-readable name ("date_calendar_date")
        rule_type: "calendar_date", "positive" or "range"
        field_name: Which field this rule reads
        parameters: Rule-specific params (e.g., {"min": 16, "max": 80})
        severity: Default severity of a finding; validators may override it
        issue: Issue template, "{value}" is replaced by the offending value
        suggestion: Remediation hint attached to findings
        enabled: Whether the rule is active
    """

    rule_name: str = Field(..., min_length=1)
    rule_type: Literal["calendar_date", "positive", "range"]
    field_name: str = Field(..., min_length=1)
    parameters: Dict[str, Any] = Field(default_factory=dict)
    severity: Severity = Severity.HIGH
    issue: str = "Invalid {field}: {value}"
    suggestion: str | None = None
    enabled: bool = True

    class Config:
        json_schema_extra = {
            "example": {
                "rule_name": "age_range",
                "rule_type": "range",
                "field_name": "age",
                "parameters": {"min": 16, "max": 80, "zero_is_absent": True},
                "severity": "low",
                "issue": "Unusual age: {value}",
                "suggestion": "Verify age is correct",
                "enabled": True,
            }
        }

    @field_validator("issue")
    @classmethod
    def check_issue_template(cls, v):
        """Only {field} and {value} placeholders are available to templates."""
        try:
            v.format(field="field", value="value")
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(f"Invalid issue template {v!r}: {e}")
        return v

    def render_issue(self, value: str) -> str:
        return self.issue.format(field=self.field_name, value=value)
