"""
Dataset model representing a named collection of records from one source.
"""

from datetime import datetime, timezone
from typing import Any, Literal, Mapping, Sequence

from pydantic import BaseModel, Field

from .record import Record

SourceKind = Literal["spreadsheet-link", "file-upload"]


class Dataset(BaseModel):
    """
    A named, typed collection of records held in memory for a session.

    Attributes:
        name: Display name, unique within a session
        source_kind: "spreadsheet-link" or "file-upload"
        location: Sheet URL or file path the records came from
        ingested_at: When the records were loaded
        records: Rows in source order
    """

    name: str = Field(..., min_length=1, max_length=255)
    source_kind: SourceKind
    location: str | None = None
    ingested_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    records: list[Record] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "name": "partner_sheet",
                "source_kind": "spreadsheet-link",
                "location": "https://docs.google.com/spreadsheets/d/1AbC/edit",
                "records": [
                    {"id": 1, "data": {"date": "2024-01-15", "headcount": 15, "age": 25}}
                ],
            }
        }

    @classmethod
    def from_rows(
        cls,
        name: str,
        source_kind: SourceKind,
        rows: Sequence[Mapping[str, Any]],
        location: str | None = None,
    ) -> "Dataset":
        """Build a dataset from flat row mappings."""
        records = [Record.from_mapping(row, position) for position, row in enumerate(rows, start=1)]
        return cls(name=name, source_kind=source_kind, location=location, records=records)

    @property
    def row_count(self) -> int:
        return len(self.records)

    @property
    def columns(self) -> list[str]:
        """Union of column names in first-seen order."""
        seen: dict[str, None] = {}
        for record in self.records:
            for column in record.columns:
                seen.setdefault(column, None)
        return list(seen)
