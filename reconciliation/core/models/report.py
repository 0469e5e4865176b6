"""
Report models: severity tallies and per-dataset analysis results.
"""

from datetime import datetime, timezone
from typing import Any, Iterable

from pydantic import BaseModel, Field

from .dataset import SourceKind
from .finding import Finding, Severity


class SeveritySummary(BaseModel):
    """
    Count of findings per severity, derived from a finding list.
    """

    total: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0

    @classmethod
    def from_findings(cls, findings: Iterable[Finding]) -> "SeveritySummary":
        total = high = medium = low = 0
        for finding in findings:
            total += 1
            if finding.severity is Severity.HIGH:
                high += 1
            elif finding.severity is Severity.MEDIUM:
                medium += 1
            else:
                low += 1
        return cls(total=total, high=high, medium=medium, low=low)

    def to_dict(self) -> dict[str, int]:
        return self.model_dump()


class DatasetReport(BaseModel):
    """
    Findings for one dataset from one analysis run.
    """

    dataset: str
    source_kind: SourceKind
    record_count: int = Field(..., ge=0)
    findings: list[Finding] = Field(default_factory=list)

    @property
    def summary(self) -> SeveritySummary:
        return SeveritySummary.from_findings(self.findings)

    def to_dict(self) -> dict[str, Any]:
        return {
            "dataset": self.dataset,
            "source_kind": self.source_kind,
            "record_count": self.record_count,
            "summary": self.summary.to_dict(),
            "findings": [finding.to_dict() for finding in self.findings],
        }


class ReconciliationReport(BaseModel):
    """
    Outcome of analysing every dataset loaded in a session.

    Replaces the previous report wholesale; reports are never merged.
    """

    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    datasets: list[DatasetReport] = Field(default_factory=list)

    @property
    def findings(self) -> list[Finding]:
        """All findings, dataset by dataset in load order."""
        return [finding for report in self.datasets for finding in report.findings]

    @property
    def summary(self) -> SeveritySummary:
        return SeveritySummary.from_findings(self.findings)

    @property
    def has_high_severity(self) -> bool:
        return self.summary.high > 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "generated_at": self.generated_at.isoformat(),
            "summary": self.summary.to_dict(),
            "datasets": [report.to_dict() for report in self.datasets],
        }
