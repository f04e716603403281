"""Base record type for rows read from the hosted data store."""

from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    """
    A remote row mirrored as a typed record.

    Unknown columns are ignored so schema additions on the backend never break
    reads; embedded relations are exposed under readable attribute names while
    still accepting the backend's table names as aliases.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class WritePayload(BaseModel):
    """Fields a caller wants written; only explicitly set fields are sent."""

    model_config = ConfigDict(extra="forbid")

    def to_row(self) -> dict:
        return self.model_dump(mode="json", exclude_unset=True)
