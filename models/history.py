"""
Production history schemas.

History entries are the archived per-shift results of past runs. They
carry no pallet or schedule state and are never changed once appended.
"""

from datetime import date as date_type
from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from models.base import BaseSchema, CamelSchema
from models.production import ProgressStatus
from models.shift import Shift


class HistoryEntry(BaseSchema):
    """One archived shift result."""

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=False,
        validate_assignment=False
    )

    date: date_type
    shift: Shift
    product: str = Field(..., min_length=1)
    weight: int = Field(..., gt=0, description="Grams per unit")
    target: int = Field(..., gt=0)
    produced: int = Field(..., ge=0)


class HistoryFilterCriteria(BaseSchema):
    """
    Exact-match history filter.

    Every field is optional; None or a blank string matches anything.
    Other values are compared as given, without trimming.
    Weight arrives as text from query strings and is compared as a number.
    Unknown fields are rejected.
    """

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=False)

    date: Optional[date_type] = None
    shift: Optional[Shift] = None
    product: Optional[str] = None
    weight: Optional[int] = None

    @field_validator("date", "shift", "product", "weight", mode="before")
    @classmethod
    def empty_is_wildcard(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def is_empty(self) -> bool:
        return all(
            value is None
            for value in (self.date, self.shift, self.product, self.weight)
        )


class HistoryRow(CamelSchema):
    """History entry with its compliance percent, as shown in the history table."""

    date: date_type
    shift: Shift
    product: str
    weight: int
    target: int
    produced: int
    progress: int
    status: ProgressStatus


class HistoryListResponse(CamelSchema):
    """Filtered history."""

    data: list[HistoryRow]
    total: int


class FilterOptions(CamelSchema):
    """Values offered by the history filter form."""

    shifts: list[Shift]
    products: list[str]
    weights: list[int]
