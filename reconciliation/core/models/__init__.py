"""
Core data models for impact data reconciliation.

All models use Pydantic for runtime validation and type safety.
"""

from .dataset import Dataset, SourceKind
from .finding import Finding, Severity, sort_by_severity
from .record import Record
from .report import DatasetReport, ReconciliationReport, SeveritySummary
from .validation_rule import ValidationRule

__all__ = [
    "Record",
    "Dataset",
    "SourceKind",
    "Finding",
    "Severity",
    "sort_by_severity",
    "SeveritySummary",
    "DatasetReport",
    "ReconciliationReport",
    "ValidationRule",
]
