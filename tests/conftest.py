"""
Pytest configuration and fixtures for impact-reconciliation tests

This module provides shared fixtures for unit and integration tests.
"""
import pytest

from reconciliation.core.models import Dataset
from reconciliation.core.rules import RuleEngine


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external services"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that exercise readers, session and CLI together"
    )


# =======================
# ENGINE FIXTURES
# =======================

@pytest.fixture
def engine() -> RuleEngine:
    """Rule engine with the default date/headcount/age battery"""
    return RuleEngine()


# =======================
# SAMPLE DATA FIXTURES
# =======================

@pytest.fixture
def reference_records() -> list[dict]:
    """Three records where row 2 has a bad date and row 3 a negative headcount"""
    return [
        {"id": 1, "date": "2024-01-15", "headcount": 15, "age": 25},
        {"id": 2, "date": "2024-13-25", "headcount": 18, "age": 35},
        {"id": 3, "date": "2024-03-10", "headcount": -5, "age": 28},
    ]


@pytest.fixture
def sheet_rows() -> list[dict]:
    """Rows as a partner's shared sheet provides them"""
    return [
        {"id": 1, "name": "John Doe", "age": 25, "location": "Nepal", "program": "Prevention",
         "headcount": 15, "date": "2024-01-15"},
        {"id": 2, "name": "Jane Smith", "age": 30, "location": "Cambodia", "program": "Provide",
         "headcount": 22, "date": "2024-02-20"},
        {"id": 3, "name": "Bob Johnson", "age": 35, "location": "Canada", "program": "Prepare",
         "headcount": 18, "date": "2024-13-25"},
        {"id": 4, "name": "Alice Brown", "age": 28, "location": "Nepal", "program": "Prevention",
         "headcount": -5, "date": "2024-03-10"},
    ]


@pytest.fixture
def upload_rows() -> list[dict]:
    """Rows as an uploaded workbook provides them"""
    return [
        {"id": 1, "name": "Mike Wilson", "age": 32, "location": "Cambodia", "program": "Provide",
         "headcount": 20, "date": "2024-01-18"},
        {"id": 2, "name": "Sarah Davis", "age": 27, "location": "Canada", "program": "Prepare",
         "headcount": 25, "date": "2024-02-22"},
        {"id": 3, "name": "Tom Garcia", "age": 45, "location": "Nepal", "program": "Prevention",
         "headcount": 12, "date": "2024-02-30"},
        {"id": 4, "name": "Lisa Martinez", "age": 29, "location": "Cambodia", "program": "Provide",
         "headcount": 0, "date": "2024-03-15"},
    ]


@pytest.fixture
def sheet_dataset(sheet_rows) -> Dataset:
    return Dataset.from_rows(
        name="partner_sheet",
        source_kind="spreadsheet-link",
        rows=sheet_rows,
        location="https://docs.google.com/spreadsheets/d/1AbCdEf/edit",
    )


@pytest.fixture
def upload_dataset(upload_rows) -> Dataset:
    return Dataset.from_rows(name="partners.xlsx", source_kind="file-upload", rows=upload_rows)


@pytest.fixture
def sheet_csv_text() -> str:
    """CSV export of a shared sheet"""
    return (
        "id,name,age,location,program,headcount,date\n"
        "1,John Doe,25,Nepal,Prevention,15,2024-01-15\n"
        "2,Jane Smith,30,Cambodia,Provide,22,2024-02-20\n"
        "3,Bob Johnson,35,Canada,Prepare,18,2024-13-25\n"
        "4,Alice Brown,28,Nepal,Prevention,-5,2024-03-10\n"
    )


@pytest.fixture
def upload_csv(tmp_path, sheet_csv_text):
    """An uploaded CSV file on disk"""
    path = tmp_path / "partners.csv"
    path.write_text(sheet_csv_text)
    return path
