"""
Impact data reconciliation.

Flags data-quality problems (invalid dates, non-positive headcounts,
unusual ages) in tabular records from spreadsheet links and uploads.
"""

from .core.models import Dataset, Finding, Record, Severity, SeveritySummary
from .core.rules import RuleEngine, validate
from .session import DatasetNotFoundError, ReconciliationSession

__version__ = "0.1.0"

__all__ = [
    "validate",
    "RuleEngine",
    "ReconciliationSession",
    "DatasetNotFoundError",
    "Record",
    "Dataset",
    "Finding",
    "Severity",
    "SeveritySummary",
]
