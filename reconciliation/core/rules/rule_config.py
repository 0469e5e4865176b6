"""
Rule configuration management.

Loads the reconciliation rule battery from YAML files and provides the
built-in default battery used when no configuration is given.
"""

from pathlib import Path
from typing import Any

import pydantic
import yaml

from ..models import Severity, ValidationRule


class RuleConfigError(ValueError):
    """Raised when a rule configuration is malformed."""
    pass


class RuleConfigLoader:
    """
    Loads validation rules from YAML configuration files.

    Expected YAML format:
    ```yaml
    rules:
      date:
        - type: calendar_date
          severity: high
          issue: "Invalid date format: {value}"
          suggestion: "Use YYYY-MM-DD format"

      age:
        - type: range
          severity: low
          params:
            min: 16
            max: 80
            zero_is_absent: true
          issue: "Unusual age: {value}"
          suggestion: "Verify age is correct"
    ```

    Fields are validated in the order they appear in the file, and each
    field's rules in list order.
    """

    def __init__(self, config_path: str | Path):
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Rule configuration file not found: {config_path}")

    def load_rules(self) -> list[dict[str, Any]]:
        """
        Load and parse validation rules from YAML file.

        Returns:
            List of rule dictionaries suitable for RuleEngine

        Raises:
            RuleConfigError: If YAML is invalid or missing required fields
        """
        try:
            with open(self.config_path) as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise RuleConfigError(f"Invalid YAML in {self.config_path}: {e}")

        if not isinstance(config, dict) or "rules" not in config:
            raise RuleConfigError("Configuration file must contain 'rules' section")

        field_rules = config["rules"]
        if not isinstance(field_rules, dict):
            raise RuleConfigError("'rules' section must map field names to rule lists")

        rules = []
        for field_name, field_rule_list in field_rules.items():
            if not isinstance(field_rule_list, list):
                raise RuleConfigError(f"Rules for field '{field_name}' must be a list")

            for idx, rule_def in enumerate(field_rule_list):
                rules.append(self._parse_rule(str(field_name), rule_def, idx))

        return rules

    def _parse_rule(self, field_name: str, rule_def: Any, idx: int) -> dict[str, Any]:
        """
        Parse a single rule definition.

        Args:
            field_name: The field this rule applies to
            rule_def: The rule definition from YAML
            idx: Index of this rule for the field (for naming)

        Raises:
            RuleConfigError: If rule definition is invalid
        """
        if not isinstance(rule_def, dict) or "type" not in rule_def:
            raise RuleConfigError(f"Rule for field '{field_name}' is missing 'type'")

        rule_type = rule_def["type"]
        rule = {
            "rule_name": rule_def.get("name", f"{field_name}_{rule_type}_{idx}"),
            "rule_type": rule_type,
            "field_name": field_name,
            "parameters": rule_def.get("params", rule_def.get("parameters")) or {},
            "severity": rule_def.get("severity", Severity.HIGH.value),
            "enabled": rule_def.get("enabled", True),
        }
        for optional in ("issue", "suggestion"):
            if optional in rule_def:
                rule[optional] = rule_def[optional]

        return normalize_rule(rule)


def normalize_rule(rule: dict[str, Any]) -> dict[str, Any]:
    """
    Check a rule dictionary against the ValidationRule model and fill defaults.

    Raises:
        RuleConfigError: If the rule does not describe a valid check
    """
    try:
        return ValidationRule(**rule).model_dump()
    except pydantic.ValidationError as e:
        name = rule.get("rule_name", "<unnamed>")
        raise RuleConfigError(f"Invalid rule '{name}': {e}")


class RuleConfigBuilder:
    """
    Programmatically build rule configurations (for defaults, testing or dynamic rules).
    """

    def __init__(self):
        self.rules: list[dict[str, Any]] = []

    def add_calendar_date(
        self,
        field_name: str,
        severity: Severity = Severity.HIGH,
        issue: str = "Invalid date format: {value}",
        suggestion: str | None = "Use YYYY-MM-DD format",
    ) -> "RuleConfigBuilder":
        """Add a YYYY-MM-DD calendar date rule."""
        self.rules.append({
            "rule_name": f"{field_name}_calendar_date",
            "rule_type": "calendar_date",
            "field_name": field_name,
            "parameters": {},
            "severity": severity,
            "issue": issue,
            "suggestion": suggestion,
            "enabled": True,
        })
        return self

    def add_positive(
        self,
        field_name: str,
        negative_severity: Severity = Severity.HIGH,
        zero_severity: Severity = Severity.MEDIUM,
        issue: str = "Invalid {field}: {value}",
        suggestion: str | None = None,
    ) -> "RuleConfigBuilder":
        """Add a strictly-positive number rule."""
        self.rules.append({
            "rule_name": f"{field_name}_positive",
            "rule_type": "positive",
            "field_name": field_name,
            "parameters": {
                "negative_severity": Severity(negative_severity).value,
                "zero_severity": Severity(zero_severity).value,
            },
            "severity": negative_severity,
            "issue": issue,
            "suggestion": suggestion,
            "enabled": True,
        })
        return self

    def add_range(
        self,
        field_name: str,
        min_value: float | None = None,
        max_value: float | None = None,
        zero_is_absent: bool = False,
        severity: Severity = Severity.LOW,
        issue: str = "Invalid {field}: {value}",
        suggestion: str | None = None,
    ) -> "RuleConfigBuilder":
        """Add an inclusive range rule."""
        params: dict[str, Any] = {"zero_is_absent": zero_is_absent}
        if min_value is not None:
            params["min"] = min_value
        if max_value is not None:
            params["max"] = max_value

        self.rules.append({
            "rule_name": f"{field_name}_range",
            "rule_type": "range",
            "field_name": field_name,
            "parameters": params,
            "severity": severity,
            "issue": issue,
            "suggestion": suggestion,
            "enabled": True,
        })
        return self

    def build(self) -> list[dict[str, Any]]:
        """Build and return the rule configuration."""
        return [normalize_rule(rule) for rule in self.rules]


def default_rules() -> list[dict[str, Any]]:
    """
    The fixed battery applied to impact data: date, then headcount, then age.
    """
    return (
        RuleConfigBuilder()
        .add_calendar_date("date")
        .add_positive(
            "headcount",
            issue="Invalid headcount: {value}",
            suggestion="Headcount should be a positive number",
        )
        .add_range(
            "age",
            min_value=16,
            max_value=80,
            zero_is_absent=True,
            issue="Unusual age: {value}",
            suggestion="Verify age is correct",
        )
        .build()
    )
