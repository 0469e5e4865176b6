"""
Logging and metrics for reconciliation runs.
"""

from .logger import get_logger, log_operation, set_level, setup_logger
from .metrics import MetricsCollector, get_metrics

__all__ = [
    "get_logger",
    "setup_logger",
    "set_level",
    "log_operation",
    "MetricsCollector",
    "get_metrics",
]
