"""
Command-line interface for data reconciliation.

Usage:
    python -m reconciliation.cli.reconcile_cli check --input <file_path> [options]
    python -m reconciliation.cli.reconcile_cli rules [--rules <yaml>]
"""

import argparse
import json
import os
import sys

from reconciliation.core.models import DatasetReport, ReconciliationReport, sort_by_severity
from reconciliation.core.rules import RuleConfigError, RuleConfigLoader, RuleEngine
from reconciliation.ingest import FileReadError, FileReader, UnsupportedFileFormatError
from reconciliation.observability.logger import get_logger, set_level
from reconciliation.session import ReconciliationSession

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_HIGH_SEVERITY = 1
EXIT_USAGE = 2

RULES_ENV_VAR = "RECONCILIATION_RULES"


def load_rules(path: str | None):
    """Rules from the given YAML file, or None for the default battery."""
    path = path or os.getenv(RULES_ENV_VAR)
    if not path:
        return None
    logger.info(f"Loading rules from {path}")
    return RuleConfigLoader(path).load_rules()


def print_dataset_report(report: DatasetReport, by_severity: bool) -> None:
    summary = report.summary
    print(f"\n{'=' * 60}")
    print(f"{report.dataset} ({report.source_kind}, {report.record_count} rows)")
    print(f"{'=' * 60}")
    print(
        f"{summary.total} Issues Found: {summary.high} High Priority, "
        f"{summary.medium} Medium Priority, {summary.low} Low Priority\n"
    )

    findings = sort_by_severity(report.findings) if by_severity else report.findings
    for finding in findings:
        print(f"Row {finding.row} - {finding.column} [{finding.severity.value}]")
        print(f"  {finding.issue}")
        if finding.suggestion:
            print(f"  Suggestion: {finding.suggestion}")


def print_report(report: ReconciliationReport, output_format: str, by_severity: bool) -> None:
    if output_format == "json":
        payload = report.to_dict()
        if by_severity:
            for dataset_payload, dataset_report in zip(payload["datasets"], report.datasets):
                dataset_payload["findings"] = [
                    finding.to_dict() for finding in sort_by_severity(dataset_report.findings)
                ]
        print(json.dumps(payload, indent=2))
        return

    for dataset_report in report.datasets:
        print_dataset_report(dataset_report, by_severity)

    summary = report.summary
    print(f"\nTotal: {summary.total} issues ({summary.high} high, {summary.medium} medium, {summary.low} low)")


def check_command(args) -> int:
    """
    Load the input files, run the analysis and print the findings.

    Returns:
        Exit code: 1 when any high-severity finding exists, 2 when an input
        or rules file cannot be used, else 0
    """
    try:
        session = ReconciliationSession(load_rules(args.rules))
        reader = FileReader()
        for input_path in args.input:
            session.add_dataset(reader.read(input_path))
    except (FileNotFoundError, UnsupportedFileFormatError, FileReadError, RuleConfigError) as e:
        logger.error(f"Cannot start analysis: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    report = session.run_analysis()
    print_report(report, args.format, args.sort_by_severity)

    return EXIT_HIGH_SEVERITY if report.has_high_severity else EXIT_OK


def rules_command(args) -> int:
    """Print the active rule battery."""
    try:
        engine = RuleEngine(load_rules(args.rules))
    except (FileNotFoundError, RuleConfigError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    print(json.dumps(engine.get_rule_summary(), indent=2))
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Impact data reconciliation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check an uploaded spreadsheet
  python -m reconciliation.cli.reconcile_cli check --input data/partners.xlsx

  # Check several files, most urgent findings first, as JSON
  python -m reconciliation.cli.reconcile_cli check --input a.csv --input b.xlsx \\
      --sort-by-severity --format json

  # Use a custom rule battery
  python -m reconciliation.cli.reconcile_cli check --input data/partners.csv \\
      --rules config/reconciliation_rules.yaml
        """
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: LOG_LEVEL env var or INFO)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    check_parser = subparsers.add_parser("check", help="Check data files for discrepancies")
    check_parser.add_argument(
        "--input",
        action="append",
        required=True,
        help="Path to a .csv, .xlsx or .xls file (repeatable)"
    )
    check_parser.add_argument(
        "--rules",
        default=None,
        help=f"Path to rule YAML file (default: ${RULES_ENV_VAR} or built-in rules)"
    )
    check_parser.add_argument(
        "--format",
        default="text",
        choices=["text", "json"],
        help="Report format (default: text)"
    )
    check_parser.add_argument(
        "--sort-by-severity",
        action="store_true",
        help="List high severity findings first"
    )

    rules_parser = subparsers.add_parser("rules", help="Show the active rule battery")
    rules_parser.add_argument(
        "--rules",
        default=None,
        help=f"Path to rule YAML file (default: ${RULES_ENV_VAR} or built-in rules)"
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        set_level(args.log_level)

    if not args.command:
        parser.print_help()
        return EXIT_USAGE

    if args.command == "check":
        return check_command(args)
    return rules_command(args)


if __name__ == "__main__":
    sys.exit(main())
