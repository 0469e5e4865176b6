"""
Spreadsheet file reader for uploaded CSV and Excel files.
"""

import io
import math
import zipfile
from datetime import date, datetime
from pathlib import Path
from typing import Any

import pandas as pd

from ..core.models import Dataset, SourceKind
from ..observability.logger import get_logger

logger = get_logger(__name__)

DATE_OUTPUT_FORMAT = "%Y-%m-%d"

# Only empty cells are missing; "N/A", "null", "None" and the like stay as text
NA_OPTIONS = {"keep_default_na": False, "na_values": [""]}


class UnsupportedFileFormatError(ValueError):
    """Raised when an uploaded file has an extension we cannot parse."""
    pass


class FileReadError(ValueError):
    """Raised when a file or sheet export cannot be parsed into a dataset."""
    pass


def _to_native(value: Any) -> Any:
    """
    Convert a cell read by pandas into a plain record value.

    Returns None for empty cells so callers can drop them.
    """
    if value is None:
        return None
    if isinstance(value, (datetime, date)):
        if pd.isna(value):
            return None
        return value.strftime(DATE_OUTPUT_FORMAT)
    if isinstance(value, float):
        if math.isnan(value):
            return None
        return int(value) if value.is_integer() else value
    if isinstance(value, str):
        return value.strip()
    return value


def frame_to_dataset(
    frame: pd.DataFrame,
    name: str,
    source_kind: SourceKind,
    location: str | None = None,
) -> Dataset:
    """
    Turn a DataFrame into a Dataset, one record per row in frame order.

    Empty cells become absent fields; rows without an id are numbered
    from 1 by position.
    """
    frame = frame.rename(columns=lambda column: str(column).strip())
    rows = []
    for raw in frame.to_dict(orient="records"):
        row = {}
        for column, cell in raw.items():
            value = _to_native(cell)
            if value is not None:
                row[column] = value
        rows.append(row)

    return Dataset.from_rows(name=name, source_kind=source_kind, rows=rows, location=location)


def read_csv_text(
    text: str,
    name: str,
    source_kind: SourceKind,
    location: str | None = None,
) -> Dataset:
    """
    Parse CSV text (e.g. a sheet export) into a Dataset.

    Raises:
        FileReadError: If the text is not parseable CSV or holds invalid records
    """
    try:
        frame = pd.read_csv(io.StringIO(text), **NA_OPTIONS)
        return frame_to_dataset(frame, name=name, source_kind=source_kind, location=location)
    except ValueError as e:
        raise FileReadError(f"Cannot read {location or name}: {e}") from e


class FileReader:
    """
    Reads uploaded spreadsheet files into file-upload datasets.

    Supported formats: .csv, .xlsx, .xls
    """

    SUPPORTED_EXTENSIONS = (".csv", ".xlsx", ".xls")

    def read(self, file_path: str | Path, name: str | None = None, sheet_name: str | int = 0) -> Dataset:
        """
        Read a file into a Dataset.

        Args:
            file_path: Path to the uploaded file
            name: Dataset name (defaults to the file name)
            sheet_name: Worksheet to read from Excel workbooks

        Returns:
            Dataset with source_kind "file-upload"

        Raises:
            FileNotFoundError: If the file does not exist
            UnsupportedFileFormatError: If the extension is not supported
            FileReadError: If the content cannot be parsed into records
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Input file not found: {file_path}")

        extension = path.suffix.lower()
        if extension not in self.SUPPORTED_EXTENSIONS:
            raise UnsupportedFileFormatError(
                f"Unsupported file format: {extension or '<none>'} "
                f"(expected one of {', '.join(self.SUPPORTED_EXTENSIONS)})"
            )

        # pandas parse errors, bad encodings and invalid records all derive from ValueError
        try:
            if extension == ".csv":
                frame = pd.read_csv(path, **NA_OPTIONS)
            else:
                frame = pd.read_excel(path, sheet_name=sheet_name, **NA_OPTIONS)
            dataset = frame_to_dataset(frame, name=name or path.name, source_kind="file-upload", location=str(path))
        except (ValueError, zipfile.BadZipFile) as e:
            raise FileReadError(f"Cannot read {path}: {e}") from e

        logger.info(
            "File uploaded",
            extra={"dataset": dataset.name, "path": str(path), "record_count": dataset.row_count}
        )
        return dataset
