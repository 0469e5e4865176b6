"""
Unit tests for Pydantic data models.
"""

from datetime import datetime

import pytest
from pydantic import ValidationError

from reconciliation.core.models import (
    Dataset,
    DatasetReport,
    Finding,
    ReconciliationReport,
    Record,
    Severity,
    SeveritySummary,
    ValidationRule,
    sort_by_severity,
)


def make_finding(row: int, severity: str, column: str = "headcount") -> Finding:
    return Finding(row=row, column=column, issue=f"Invalid {column}", severity=severity)


class TestRecord:
    """Tests for Record model"""

    def test_from_mapping_keeps_id(self):
        record = Record.from_mapping({"id": 7, "date": "2024-01-15", "headcount": 3}, position=1)

        assert record.id == 7
        assert record.data == {"date": "2024-01-15", "headcount": 3}
        assert record.as_mapping() == {"id": 7, "date": "2024-01-15", "headcount": 3}

    def test_from_mapping_numbers_by_position(self):
        record = Record.from_mapping({"headcount": 3}, position=4)
        assert record.id == 4

    def test_get(self):
        record = Record(id=1, data={"age": 30})

        assert record.get("age") == 30
        assert record.get("id") == 1
        assert record.get("date") is None
        assert record.columns == ["id", "age"]


class TestDataset:
    """Tests for Dataset model"""

    def test_from_rows(self, sheet_rows):
        dataset = Dataset.from_rows("partner_sheet", "spreadsheet-link", sheet_rows)

        assert dataset.row_count == 4
        assert dataset.records[2].get("date") == "2024-13-25"
        assert isinstance(dataset.ingested_at, datetime)
        assert dataset.columns[:3] == ["id", "name", "age"]

    def test_invalid_source_kind(self):
        with pytest.raises(ValidationError) as exc_info:
            Dataset(name="x", source_kind="email-attachment")
        assert "source_kind" in str(exc_info.value)

    def test_empty_name(self):
        with pytest.raises(ValidationError) as exc_info:
            Dataset(name="", source_kind="file-upload")
        assert "name" in str(exc_info.value)

    def test_columns_union_in_first_seen_order(self):
        dataset = Dataset.from_rows("x", "file-upload", [{"date": "2024-01-01"}, {"age": 30, "date": "2024-01-02"}])
        assert dataset.columns == ["id", "date", "age"]


class TestFinding:
    """Tests for Finding model and severity ordering"""

    def test_row_must_be_positive(self):
        with pytest.raises(ValidationError):
            make_finding(0, "high")

    def test_invalid_severity(self):
        with pytest.raises(ValidationError):
            make_finding(1, "critical")

    def test_severity_rank(self):
        assert Severity.HIGH.rank < Severity.MEDIUM.rank < Severity.LOW.rank

    def test_sort_by_severity_is_stable(self):
        findings = [
            make_finding(1, "low"),
            make_finding(2, "high"),
            make_finding(3, "medium"),
            make_finding(4, "high"),
        ]

        assert [f.row for f in sort_by_severity(findings)] == [2, 4, 3, 1]

    def test_to_dict(self):
        finding = make_finding(2, "medium")
        data = finding.to_dict()

        assert data["severity"] == "medium"
        assert data["row"] == 2
        assert data["suggestion"] is None


class TestSeveritySummary:
    """Tests for SeveritySummary tallies"""

    def test_from_findings(self):
        summary = SeveritySummary.from_findings([
            make_finding(1, "high"),
            make_finding(2, "high"),
            make_finding(3, "medium"),
            make_finding(4, "low"),
        ])

        assert summary.to_dict() == {"total": 4, "high": 2, "medium": 1, "low": 1}

    def test_empty(self):
        assert SeveritySummary.from_findings([]).total == 0


class TestReports:
    """Tests for dataset and session reports"""

    def test_report_flattens_in_dataset_order(self):
        report = ReconciliationReport(datasets=[
            DatasetReport(dataset="a", source_kind="spreadsheet-link", record_count=2,
                          findings=[make_finding(1, "low")]),
            DatasetReport(dataset="b", source_kind="file-upload", record_count=1,
                          findings=[make_finding(1, "high")]),
        ])

        assert [f.severity for f in report.findings] == [Severity.LOW, Severity.HIGH]
        assert report.summary.total == 2
        assert report.has_high_severity is True

        data = report.to_dict()
        assert data["summary"]["high"] == 1
        assert data["datasets"][0]["summary"]["low"] == 1
        assert data["datasets"][1]["findings"][0]["severity"] == "high"


class TestValidationRule:
    """Tests for ValidationRule model"""

    def test_defaults(self):
        rule = ValidationRule(rule_name="r", rule_type="positive", field_name="headcount")

        assert rule.severity is Severity.HIGH
        assert rule.enabled is True
        assert rule.render_issue("-1") == "Invalid headcount: -1"

    def test_invalid_rule_type(self):
        with pytest.raises(ValidationError):
            ValidationRule(rule_name="r", rule_type="required_field", field_name="x")

    def test_invalid_issue_template(self):
        with pytest.raises(ValidationError, match="issue template"):
            ValidationRule(rule_name="r", rule_type="positive", field_name="x", issue="{0}")
