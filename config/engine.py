"""
Engine configuration.

EngineConfig is passed explicitly to every engine function instead of
being read from global settings, so tests can build one per case.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models.shift import Shift, DEFAULT_SHIFTS


DEFAULT_ALERT_THRESHOLD = 3
DEFAULT_PALLET_CAPACITY = 49


class EngineConfig(BaseModel):
    """
    Process-wide knobs consumed by the metrics, pallet and schedule engines.

    Attributes:
        alert_threshold: Remaining pallets at or below which a run is flagged
        pallet_capacity: Units that fill one pallet
        shifts: Shift order used for iteration and lookups
    """

    model_config = ConfigDict(frozen=True)

    alert_threshold: int = Field(
        default=DEFAULT_ALERT_THRESHOLD,
        ge=0,
        description="Remaining-pallet alert threshold (inclusive)"
    )
    pallet_capacity: int = Field(
        default=DEFAULT_PALLET_CAPACITY,
        gt=0,
        description="Units per pallet"
    )
    shifts: tuple[Shift, ...] = Field(
        default=DEFAULT_SHIFTS,
        min_length=1,
        description="Ordered shift set"
    )

    @field_validator("shifts")
    @classmethod
    def shifts_unique(cls, value: tuple[Shift, ...]) -> tuple[Shift, ...]:
        if len(set(value)) != len(value):
            raise ValueError("shift set contains duplicates")
        return value

    @property
    def shift_codes(self) -> list[str]:
        return [shift.value for shift in self.shifts]
