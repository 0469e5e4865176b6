"""
Record model representing one row of ingested tabular data (ephemeral).
"""

from typing import Any, Mapping

from pydantic import BaseModel, Field

ID_FIELD = "id"


class Record(BaseModel):
    """
    One row of ingested data.

    Note: the rule engine also accepts plain mappings; Record is the form
    produced by the dataset readers.

    Attributes:
        id: Identifier of the row within its dataset
        data: Column name to value (string or number); absent columns
                are simply missing from the mapping
    """

    id: int | str
    data: dict[str, Any] = Field(default_factory=dict)

    class Config:
        json_schema_extra = {
            "example": {
                "id": 3,
                "data": {
                    "name": "Bob Johnson",
                    "age": 35,
                    "location": "Canada",
                    "program": "Prepare",
                    "headcount": 18,
                    "date": "2024-13-25",
                },
            }
        }

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any], position: int) -> "Record":
        """
        Build a Record from a flat row mapping, numbering it by position
        when the row carries no id.
        """
        data = {key: value for key, value in mapping.items() if key != ID_FIELD}
        record_id = mapping.get(ID_FIELD)
        if record_id is None:
            record_id = position
        return cls(id=record_id, data=data)

    def get(self, field_name: str, default: Any = None) -> Any:
        if field_name == ID_FIELD:
            return self.id
        return self.data.get(field_name, default)

    def as_mapping(self) -> dict[str, Any]:
        """Flat view of the row, id first."""
        return {ID_FIELD: self.id, **self.data}

    @property
    def columns(self) -> list[str]:
        return [ID_FIELD, *self.data]
