"""
Shift models.

A production run is scheduled across a fixed set of six shifts (A-F).
The schedule is a fixed structure keyed by the Shift enum, so iteration
order never depends on how the source mapping was built.
"""

from enum import Enum
from typing import Iterator

from pydantic import ConfigDict, Field

from models.base import BaseSchema


class Shift(str, Enum):
    """Shift identifiers, in plant order."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"


DEFAULT_SHIFTS: tuple[Shift, ...] = tuple(Shift)


class ShiftSchedule(BaseSchema):
    """
    Which shifts a product run is scheduled on.

    Serialized with the shift letters as keys: {"A": true, "B": false, ...}.
    Missing shifts default to not scheduled; unknown keys are rejected.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    a: bool = Field(default=False, alias="A")
    b: bool = Field(default=False, alias="B")
    c: bool = Field(default=False, alias="C")
    d: bool = Field(default=False, alias="D")
    e: bool = Field(default=False, alias="E")
    f: bool = Field(default=False, alias="F")

    def get(self, shift: Shift) -> bool:
        """Scheduled flag for one shift."""
        return getattr(self, shift.value.lower())

    def items(self) -> Iterator[tuple[Shift, bool]]:
        """(shift, scheduled) pairs in A-F order."""
        for shift in Shift:
            yield shift, self.get(shift)
