"""
Finding model: one flagged data-quality issue tied to a record and a field.
"""

from enum import Enum
from typing import Any, Iterable

from pydantic import BaseModel, Field


class Severity(str, Enum):
    """
    Urgency of a finding. Ordered high > medium > low.
    """

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Sort key: 0 is most urgent."""
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {
    Severity.HIGH: 0,
    Severity.MEDIUM: 1,
    Severity.LOW: 2,
}


class Finding(BaseModel):
    """
    A single discrepancy produced by a validation run (ephemeral).

    Attributes:
        row: 1-based position of the record in the validated sequence
        column: Offending field name
        issue: Human-readable description embedding the offending value
        severity: high, medium or low
        suggestion: Optional remediation hint
        rule_name: Rule that produced the finding
        record_id: The record's own id, when it carries one
        dataset: Dataset name, when validated as part of a named dataset
    """

    row: int = Field(..., ge=1)
    column: str = Field(..., min_length=1)
    issue: str
    severity: Severity
    suggestion: str | None = None
    rule_name: str | None = None
    record_id: int | str | None = None
    dataset: str | None = None

    class Config:
        json_schema_extra = {
            "example": {
                "row": 2,
                "column": "date",
                "issue": "Invalid date format: 2024-13-25",
                "severity": "high",
                "suggestion": "Use YYYY-MM-DD format",
                "rule_name": "date_calendar_date",
                "record_id": 2,
                "dataset": "partner_sheet",
            }
        }

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


def sort_by_severity(findings: Iterable[Finding]) -> list[Finding]:
    """
    Order findings most urgent first, keeping row/rule order within a severity.
    """
    return sorted(findings, key=lambda finding: finding.severity.rank)
