"""
Reconciliation session: the datasets a user has loaded and the latest
analysis of them.

A session is owned by the calling application; nothing here is global.
"""

from typing import Any

from .core.models import Dataset, ReconciliationReport
from .core.rules import RuleEngine
from .observability.logger import get_logger, log_operation

logger = get_logger(__name__)


class DatasetNotFoundError(KeyError):
    """Raised when a session has no dataset with the requested name."""
    pass


class ReconciliationSession:
    """
    Holds loaded datasets by name and runs the rule battery over them.

    Each dataset is validated independently; row numbers in findings are
    positions within that dataset. Every run replaces last_report.
    """

    def __init__(self, rules: list[dict[str, Any]] | None = None):
        self.engine = RuleEngine(rules)
        self._datasets: dict[str, Dataset] = {}
        self.last_report: ReconciliationReport | None = None

    def add_dataset(self, dataset: Dataset) -> None:
        """Load a dataset, replacing any earlier one with the same name."""
        if dataset.name in self._datasets:
            logger.info("Replacing dataset", extra={"dataset": dataset.name})
        self._datasets[dataset.name] = dataset

    def remove_dataset(self, name: str) -> Dataset:
        try:
            return self._datasets.pop(name)
        except KeyError:
            raise DatasetNotFoundError(name) from None

    def get_dataset(self, name: str) -> Dataset:
        try:
            return self._datasets[name]
        except KeyError:
            raise DatasetNotFoundError(name) from None

    @property
    def datasets(self) -> list[Dataset]:
        """Loaded datasets in load order."""
        return list(self._datasets.values())

    def clear(self) -> None:
        self._datasets.clear()
        self.last_report = None

    def run_analysis(self) -> ReconciliationReport:
        """
        Validate every loaded dataset and store the report.

        Raises:
            ValueError: If no dataset has been loaded
        """
        if not self._datasets:
            raise ValueError("No datasets loaded; connect a sheet or upload a file first")

        with log_operation("Reconciliation analysis", logger=logger, dataset_count=len(self._datasets)):
            reports = [self.engine.validate_dataset(dataset) for dataset in self._datasets.values()]

        report = ReconciliationReport(datasets=reports)
        self.last_report = report
        logger.info("Analysis complete", extra=report.summary.to_dict())
        return report
