"""
Reconciliation rule engine and configuration management.
"""

from .rule_config import RuleConfigBuilder, RuleConfigError, RuleConfigLoader, default_rules
from .rule_engine import RuleEngine, format_value, validate

__all__ = [
    "RuleEngine",
    "RuleConfigLoader",
    "RuleConfigBuilder",
    "RuleConfigError",
    "default_rules",
    "format_value",
    "validate",
]
