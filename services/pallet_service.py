"""
Pallet accounting: read-only view over a record's pallet counts.

Nothing here changes the counts. An unbalanced record
(completed + remaining != total after a later mutation) is reported
through is_balanced, not corrected.
"""

import structlog

from config.engine import EngineConfig
from models.production import ProductionRecord, PalletStatus
from utils.number_utils import round_percent

logger = structlog.get_logger(__name__)


def fill_percent(current_pallet: int, capacity: int) -> int:
    """Current pallet fill as a whole percent of capacity (halves up)."""
    return round_percent(current_pallet, capacity)


def pallet_status(record: ProductionRecord, config: EngineConfig) -> PalletStatus:
    """
    Derive the pallet view for one record.

    Args:
        record: Production record
        config: Engine configuration (supplies pallet capacity)

    Returns:
        PalletStatus with counts, capacity and current fill
    """
    pallets = record.pallets
    capacity = config.pallet_capacity
    balanced = pallets.completed + pallets.remaining == pallets.total

    if not balanced:
        logger.debug(
            "pallet_counts_unbalanced",
            record_id=record.id,
            total=pallets.total,
            completed=pallets.completed,
            remaining=pallets.remaining
        )

    return PalletStatus(
        total=pallets.total,
        completed=pallets.completed,
        remaining=pallets.remaining,
        current_pallet=pallets.current_pallet,
        capacity=capacity,
        current_fill_pct=fill_percent(pallets.current_pallet, capacity),
        units_to_next_pallet=max(capacity - pallets.current_pallet, 0),
        is_balanced=balanced,
    )
