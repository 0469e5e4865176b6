"""
Rule engine for reconciling impact data.

The rule engine builds validators from rule configurations, applies them to
every record of a dataset, and turns each failed check into a Finding.
"""

import logging
from typing import Any, Iterable, Mapping

from ..models import Dataset, DatasetReport, Finding, Record, ValidationRule
from ..validators import (
    BaseValidator,
    CalendarDateValidator,
    PositiveNumberValidator,
    RangeValidator,
    ValidationError,
)
from .rule_config import RuleConfigError, default_rules, normalize_rule
from ...observability.logger import get_logger, log_operation
from ...observability.metrics import UNNAMED_DATASET, MetricsCollector

logger = get_logger(__name__)


def format_value(value: Any) -> str:
    """
    Render an offending value for an issue message.

    Strings are kept verbatim; floats that hold whole numbers print without
    a trailing ".0" the way spreadsheets display them.
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class RuleEngine:
    """
    Applies the rule battery to records.

    Rules run in configuration order for every record, and every failing
    rule yields one Finding. Malformed field values never raise; they either
    produce a finding or are skipped as not applicable.
    """

    VALIDATOR_REGISTRY = {
        "calendar_date": CalendarDateValidator,
        "positive": PositiveNumberValidator,
        "range": RangeValidator,
    }

    def __init__(self, rules: list[dict[str, Any]] | None = None):
        """
        Initialize the rule engine with validation rules.

        Args:
            rules: List of rule configurations (see ValidationRule); the
                   default date/headcount/age battery when None
        """
        self.rules = default_rules() if rules is None else rules
        self.validators: list[tuple[ValidationRule, BaseValidator]] = []
        self._build_validators()

    def _build_validators(self) -> None:
        """Build validator instances from rule configurations."""
        for rule_config in self.rules:
            rule = ValidationRule(**normalize_rule(rule_config))
            if not rule.enabled:
                continue

            validator_class = self.VALIDATOR_REGISTRY.get(rule.rule_type)
            if not validator_class:
                raise RuleConfigError(f"Unknown rule type: {rule.rule_type}")

            try:
                validator = validator_class(rule.field_name, rule.parameters)
            except ValueError as e:
                raise RuleConfigError(f"Failed to create validator for rule '{rule.rule_name}': {e}")

            self.validators.append((rule, validator))

    def validate_record(
        self,
        record: Mapping[str, Any] | Record,
        row: int,
        dataset_name: str | None = None,
    ) -> list[Finding]:
        """
        Validate one record against all rules.

        Args:
            record: Row mapping or Record model (never mutated)
            row: 1-based position of the record in its sequence
            dataset_name: Attached to findings when given

        Returns:
            Findings in rule order, empty when the record is clean
        """
        if isinstance(record, Record):
            payload = record.as_mapping()
        elif isinstance(record, Mapping):
            payload = record
        else:
            raise TypeError(f"Record at row {row} must be a mapping, got {type(record).__name__}")

        record_id = payload.get("id")
        if isinstance(record_id, bool) or not isinstance(record_id, (int, str)):
            record_id = None

        findings = []
        for rule, validator in self.validators:
            value = payload.get(rule.field_name)

            try:
                validator.validate(value, payload)
            except ValidationError as e:
                finding = Finding(
                    row=row,
                    column=rule.field_name,
                    issue=rule.render_issue(format_value(value)),
                    severity=e.severity or rule.severity,
                    suggestion=rule.suggestion,
                    rule_name=rule.rule_name,
                    record_id=record_id,
                    dataset=dataset_name,
                )
                logger.debug(
                    "Finding emitted",
                    extra={
                        "dataset": dataset_name or UNNAMED_DATASET,
                        "row": row,
                        "column": finding.column,
                        "severity": finding.severity.value,
                        "detail": e.message,
                    }
                )
                findings.append(finding)

        return findings

    def validate(
        self,
        records: Iterable[Mapping[str, Any] | Record],
        dataset_name: str | None = None,
    ) -> list[Finding]:
        """
        Validate a sequence of records.

        Row numbers are positions in the sequence as given (1-based), not
        record ids; reordering the input renumbers the findings.

        Args:
            records: Records in presentation order; may be empty
            dataset_name: Label used for logs, metrics and findings

        Returns:
            Findings grouped by row, then by rule order

        Raises:
            ValueError: If records is None
            TypeError: If an element is not a mapping
        """
        if records is None:
            raise ValueError("records is required; pass an empty sequence when there is nothing to validate")

        findings: list[Finding] = []
        record_count = 0
        label = dataset_name or UNNAMED_DATASET
        metrics = MetricsCollector(dataset_name)

        with log_operation("Validating records", logger=logger, level=logging.DEBUG, dataset=label) as operation:
            for row, record in enumerate(records, start=1):
                findings.extend(self.validate_record(record, row, dataset_name))
                record_count = row

        metrics.record_run(record_count, operation.duration)
        for finding in findings:
            metrics.record_finding(finding.column, finding.severity.value)

        logger.debug(
            "Validation finished",
            extra={"dataset": label, "record_count": record_count, "finding_count": len(findings)}
        )
        return findings

    def validate_dataset(self, dataset: Dataset) -> DatasetReport:
        """Validate every record of a dataset and wrap the findings in a report."""
        findings = self.validate(dataset.records, dataset_name=dataset.name)
        return DatasetReport(
            dataset=dataset.name,
            source_kind=dataset.source_kind,
            record_count=dataset.row_count,
            findings=findings,
        )

    def get_rule_summary(self) -> dict[str, Any]:
        """
        Get summary of loaded rules.

        Returns:
            Dictionary with rule counts by type and severity, and rule order
        """
        return {
            "total_rules": len(self.validators),
            "rules_by_type": self._count_by(lambda rule, validator: validator.rule_type),
            "rules_by_severity": self._count_by(lambda rule, validator: rule.severity.value),
            "rule_order": [rule.rule_name for rule, _ in self.validators],
        }

    def _count_by(self, key) -> dict[str, int]:
        counts: dict[str, int] = {}
        for rule, validator in self.validators:
            name = key(rule, validator)
            counts[name] = counts.get(name, 0) + 1
        return counts


def validate(records: Iterable[Mapping[str, Any] | Record]) -> list[Finding]:
    """
    Run the default rule battery over records.

    Same input in the same order always yields the same findings.
    """
    return RuleEngine().validate(records)
