"""
Production record schemas.

One ProductionRecord per active product run on the line. Records are
read-only inputs: the engine derives values from them and never writes
produced counts, pallets or schedules back.
"""

from enum import Enum
from typing import Optional

from pydantic import ConfigDict, Field, model_validator

from models.base import CamelSchema
from models.shift import ShiftSchedule


class ProgressStatus(str, Enum):
    """Progress band for a run."""

    CRITICAL = "CRITICAL"    # < 40%
    WARNING = "WARNING"      # < 70%
    ON_TRACK = "ON_TRACK"    # 70% - 99%
    COMPLETE = "COMPLETE"    # >= 100%


class Pallets(CamelSchema):
    """
    Pallet counts for a run.

    completed + remaining == total is checked when the model is built.
    Later assignments are not re-validated; keeping the counts consistent
    after construction is up to whoever mutates them.
    """

    model_config = ConfigDict(validate_assignment=False)

    total: int = Field(..., ge=0, description="Pallets planned for the run")
    completed: int = Field(..., ge=0, description="Pallets closed")
    remaining: int = Field(..., ge=0, description="Pallets still to build")
    current_pallet: int = Field(
        ...,
        ge=0,
        description="Units on the pallet being built"
    )

    @model_validator(mode="after")
    def check_counts(self) -> "Pallets":
        if self.completed + self.remaining != self.total:
            raise ValueError(
                f"completed ({self.completed}) + remaining ({self.remaining}) "
                f"must equal total ({self.total})"
            )
        return self


class ProductionRecord(CamelSchema):
    """An in-progress product run."""

    id: int = Field(..., description="Record identifier, unique while live")
    product: str = Field(..., min_length=1, description="Product name")
    weight: int = Field(..., gt=0, description="Grams per unit")
    target: int = Field(..., gt=0, description="Target units for the run")
    produced: int = Field(
        ...,
        ge=0,
        description="Units produced so far (may exceed target)"
    )
    pallets: Pallets
    shifts: ShiftSchedule = Field(default_factory=ShiftSchedule)
    next_shift_same_weight: bool = Field(
        default=False,
        description="Next shift keeps the same weight"
    )
    next_shift_weight_change: bool = Field(
        default=False,
        description="Next shift changes weight"
    )


class AlertType(str, Enum):
    """Alert type enumeration."""

    WEIGHT_CHANGE_NEXT = "WEIGHT_CHANGE_NEXT"
    SAME_WEIGHT_NEXT = "SAME_WEIGHT_NEXT"
    LOW_PALLETS_REMAINING = "LOW_PALLETS_REMAINING"


class AlertSeverity(str, Enum):
    """Alert severity levels."""

    CRITICAL = "CRITICAL"  # Line changeover needed
    WARNING = "WARNING"    # Run is about to finish
    INFO = "INFO"          # Informational only


class Alert(CamelSchema):
    """A classified condition on a record. Rendering is left to the client."""

    type: AlertType
    severity: AlertSeverity
    record_id: int
    value: Optional[int] = Field(
        None,
        description="Remaining pallets for LOW_PALLETS_REMAINING, weight otherwise"
    )


class PalletStatus(CamelSchema):
    """Read-only pallet accounting for one record."""

    total: int
    completed: int
    remaining: int
    current_pallet: int
    capacity: int = Field(..., description="Units per full pallet")
    current_fill_pct: int = Field(..., description="current_pallet / capacity, unbounded")
    units_to_next_pallet: int
    is_balanced: bool = Field(..., description="completed + remaining == total")


class RecordMetrics(CamelSchema):
    """Everything the dashboard card shows that is derived, not stored."""

    record_id: int
    progress: int = Field(..., description="Unclamped progress percent")
    progress_bar: int = Field(..., ge=0, le=100, description="Progress clamped for display")
    status: ProgressStatus
    alerts: list[Alert]
    pallets: PalletStatus
    scheduled_shifts: list[str]


class ProductionCard(CamelSchema):
    """A record together with its derived metrics."""

    record: ProductionRecord
    metrics: RecordMetrics


class ProductionListResponse(CamelSchema):
    """Live production view."""

    data: list[ProductionCard]
    total: int
    alert_count: int
