"""
Integration tests for the reconciliation command line.
"""

import json

import pytest

from reconciliation.cli.reconcile_cli import EXIT_HIGH_SEVERITY, EXIT_OK, EXIT_USAGE, main


@pytest.mark.integration
class TestReconcileCli:
    """Tests for the check and rules commands"""

    def test_check_text_report(self, upload_csv, capsys):
        exit_code = main(["check", "--input", str(upload_csv)])

        out = capsys.readouterr().out
        assert exit_code == EXIT_HIGH_SEVERITY
        assert "partners.csv (file-upload, 4 rows)" in out
        assert "2 Issues Found: 2 High Priority, 0 Medium Priority, 0 Low Priority" in out
        assert "Row 3 - date [high]" in out
        assert "Suggestion: Use YYYY-MM-DD format" in out

    def test_check_json_report(self, upload_csv, capsys):
        main(["check", "--input", str(upload_csv), "--format", "json"])

        payload = json.loads(capsys.readouterr().out)
        assert payload["summary"] == {"total": 2, "high": 2, "medium": 0, "low": 0}
        assert [f["row"] for f in payload["datasets"][0]["findings"]] == [3, 4]

    def test_sort_by_severity(self, tmp_path, capsys):
        path = tmp_path / "mixed.csv"
        path.write_text("date,headcount,age\n2024-01-15,3,90\n2024-01-16,0,30\n2024-01-17,-1,30\n")

        main(["check", "--input", str(path), "--format", "json", "--sort-by-severity"])

        findings = json.loads(capsys.readouterr().out)["datasets"][0]["findings"]
        assert [(f["row"], f["severity"]) for f in findings] == [(3, "high"), (2, "medium"), (1, "low")]

    def test_clean_file_exits_ok(self, tmp_path, capsys):
        path = tmp_path / "clean.csv"
        path.write_text("date,headcount,age\n2024-01-15,3,30\n")

        assert main(["check", "--input", str(path)]) == EXIT_OK
        assert "0 Issues Found" in capsys.readouterr().out

    def test_medium_only_exits_ok(self, tmp_path, capsys):
        path = tmp_path / "zero.csv"
        path.write_text("headcount\n0\n")

        assert main(["check", "--input", str(path)]) == EXIT_OK

    def test_missing_input(self, tmp_path, capsys):
        exit_code = main(["check", "--input", str(tmp_path / "missing.csv")])

        assert exit_code == EXIT_USAGE
        assert "Input file not found" in capsys.readouterr().err

    def test_empty_csv(self, tmp_path, capsys):
        path = tmp_path / "empty.csv"
        path.write_text("")

        exit_code = main(["check", "--input", str(path)])

        assert exit_code == EXIT_USAGE
        assert "Cannot read" in capsys.readouterr().err

    def test_corrupt_workbook(self, tmp_path, capsys):
        path = tmp_path / "bad.xlsx"
        path.write_bytes(b"not a workbook")

        exit_code = main(["check", "--input", str(path)])

        assert exit_code == EXIT_USAGE
        assert "Cannot read" in capsys.readouterr().err

    def test_undecodable_csv(self, tmp_path, capsys):
        path = tmp_path / "latin.csv"
        path.write_bytes(b"date,headcount\n\xff\xfe2024,3\n")

        assert main(["check", "--input", str(path)]) == EXIT_USAGE

    def test_fractional_id(self, tmp_path, capsys):
        """Test a row that cannot become a record is an input error, not a finding"""
        path = tmp_path / "ids.csv"
        path.write_text("id,headcount\n1.5,3\n")

        assert main(["check", "--input", str(path)]) == EXIT_USAGE

    def test_rules_from_env(self, tmp_path, upload_csv, monkeypatch, capsys):
        rules = tmp_path / "rules.yaml"
        rules.write_text("rules:\n  headcount:\n    - type: positive\n      severity: low\n      params:\n        negative_severity: low\n")
        monkeypatch.setenv("RECONCILIATION_RULES", str(rules))

        exit_code = main(["check", "--input", str(upload_csv), "--format", "json"])

        payload = json.loads(capsys.readouterr().out)
        assert exit_code == EXIT_OK
        assert payload["summary"] == {"total": 1, "high": 0, "medium": 0, "low": 1}

    def test_rules_command(self, capsys):
        assert main(["rules"]) == EXIT_OK

        summary = json.loads(capsys.readouterr().out)
        assert summary["total_rules"] == 3

    def test_no_command(self, capsys):
        assert main([]) == EXIT_USAGE
