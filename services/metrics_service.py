"""
Metrics engine: progress and alert classification for production records.

Same input → same output. Nothing here reads settings or touches state;
configuration arrives as an EngineConfig argument.

USAGE:

Dashboard card:
  → progress (unclamped) for the label
  → clamp_progress(progress) for the bar width
  → classify_progress(progress) for the bar colour
  → classify_alerts(record, threshold) for the alert strip
"""

import structlog

from config.engine import EngineConfig, DEFAULT_ALERT_THRESHOLD
from exceptions import DivisionByZeroError, ValidationError
from models.production import (
    ProductionRecord,
    ProgressStatus,
    Alert,
    AlertType,
    AlertSeverity,
    RecordMetrics,
)
from services.pallet_service import pallet_status
from services.schedule_service import scheduled_shifts
from utils.number_utils import round_percent

logger = structlog.get_logger(__name__)

# Progress bands (percent)
CRITICAL_BELOW = 40
WARNING_BELOW = 70
COMPLETE_AT = 100


def compute_progress(produced: int, target: int) -> int:
    """
    Progress as a whole percent: round(produced / target * 100).

    Halves round up (1/8 → 13) in floating point, so 29/200 gives 14.
    Over-production gives values above 100; clamp separately for display.

    Raises:
        DivisionByZeroError: If target is zero or negative
    """
    if target <= 0:
        logger.warning("progress_invalid_target", produced=produced, target=target)
        raise DivisionByZeroError(produced, target)

    return round_percent(produced, target)


def clamp_progress(percent: int) -> int:
    """Progress bar width: 0-100."""
    return max(0, min(percent, COMPLETE_AT))


def classify_progress(percent: int) -> ProgressStatus:
    """
    Band a progress percent.

    Checked in order, first match wins:
        < 40  → CRITICAL
        < 70  → WARNING
        >= 100 → COMPLETE
        else  → ON_TRACK
    """
    if percent < CRITICAL_BELOW:
        return ProgressStatus.CRITICAL
    if percent < WARNING_BELOW:
        return ProgressStatus.WARNING
    if percent >= COMPLETE_AT:
        return ProgressStatus.COMPLETE
    return ProgressStatus.ON_TRACK


def classify_alerts(
    record: ProductionRecord,
    alert_threshold: int = DEFAULT_ALERT_THRESHOLD
) -> list[Alert]:
    """
    Alerts that apply to a record, in display order.

    1. WEIGHT_CHANGE_NEXT:    next shift changes weight
    2. SAME_WEIGHT_NEXT:      next shift keeps weight (suppressed by 1)
    3. LOW_PALLETS_REMAINING: remaining pallets <= alert_threshold

    Args:
        record: Production record
        alert_threshold: Non-negative remaining-pallet threshold (inclusive)

    Returns:
        Every alert that applies, possibly empty

    Raises:
        ValidationError: If alert_threshold is negative
    """
    if alert_threshold < 0:
        raise ValidationError(
            message="Alert threshold must be non-negative",
            code="INVALID_ALERT_THRESHOLD",
            details={"provided": alert_threshold}
        )

    alerts: list[Alert] = []

    if record.next_shift_weight_change:
        alerts.append(Alert(
            type=AlertType.WEIGHT_CHANGE_NEXT,
            severity=AlertSeverity.CRITICAL,
            record_id=record.id,
            value=record.weight,
        ))
    elif record.next_shift_same_weight:
        alerts.append(Alert(
            type=AlertType.SAME_WEIGHT_NEXT,
            severity=AlertSeverity.INFO,
            record_id=record.id,
            value=record.weight,
        ))

    if record.pallets.remaining <= alert_threshold:
        alerts.append(Alert(
            type=AlertType.LOW_PALLETS_REMAINING,
            severity=AlertSeverity.WARNING,
            record_id=record.id,
            value=record.pallets.remaining,
        ))

    logger.debug(
        "alerts_classified",
        record_id=record.id,
        alerts=[alert.type.value for alert in alerts]
    )

    return alerts


def record_metrics(record: ProductionRecord, config: EngineConfig) -> RecordMetrics:
    """All derived values for one dashboard card."""
    progress = compute_progress(record.produced, record.target)

    return RecordMetrics(
        record_id=record.id,
        progress=progress,
        progress_bar=clamp_progress(progress),
        status=classify_progress(progress),
        alerts=classify_alerts(record, config.alert_threshold),
        pallets=pallet_status(record, config),
        scheduled_shifts=[shift.value for shift in scheduled_shifts(record, config)],
    )
