"""Record, request, and payload models for the /records endpoint."""
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt

PRIMARY_COLORS = frozenset({"red", "blue", "yellow"})


class Color(str, Enum):
    RED = "red"
    BROWN = "brown"
    BLUE = "blue"
    YELLOW = "yellow"
    GREEN = "green"


class Disposition(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


def is_primary_color(color: Union[Color, str]) -> bool:
    """True for red, blue and yellow; every other color is non-primary."""
    value = color.value if isinstance(color, Color) else color
    return value in PRIMARY_COLORS


class Record(BaseModel):
    """A single row served by /records. Owned by the server, never mutated."""

    model_config = ConfigDict(frozen=True, extra="ignore")
    id: StrictInt
    color: Color
    disposition: Disposition


class ClassifiedRecord(Record):
    """A Record annotated with whether its color is primary."""

    model_config = ConfigDict(populate_by_name=True)
    is_primary: bool = Field(..., alias="isPrimary")

    @classmethod
    def from_record(cls, record: Record) -> "ClassifiedRecord":
        return cls(
            id=record.id,
            color=record.color,
            disposition=record.disposition,
            is_primary=is_primary_color(record.color),
        )

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class PageRequest(BaseModel):
    """Caller options for a retrieve call.

    ``page`` is 1-based and defaults to the first page. An empty ``colors``
    means no color filter, not "match nothing".
    """

    model_config = ConfigDict(frozen=True, extra="ignore")
    page: StrictInt = Field(default=1, ge=1, description="1-based page number")
    colors: tuple[Color, ...] = Field(
        default=(), description="Colors to include, in query order"
    )


class RecordsRequest(BaseModel):
    """Outgoing request produced by the request builder."""

    model_config = ConfigDict(frozen=True)
    method: str = "GET"
    url: str


class RetrievePayload(BaseModel):
    """Derived view of one page of records."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)
    ids: list[int]
    open: list[ClassifiedRecord]
    closed_primary_count: int = Field(..., alias="closedPrimaryCount")
    previous_page: Optional[int] = Field(default=None, alias="previousPage")
    next_page: Optional[int] = Field(default=None, alias="nextPage")

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
