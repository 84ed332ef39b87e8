"""
Business logic services.

Each service handles one domain area.
"""

from services.metrics_service import (
    compute_progress,
    clamp_progress,
    classify_progress,
    classify_alerts,
    record_metrics,
)
from services.pallet_service import pallet_status
from services.schedule_service import (
    parse_shift,
    is_scheduled,
    iter_schedule,
    scheduled_shifts,
)
from services.history_service import (
    FilteredHistory,
    HistoryLog,
    filter_history,
    filter_options,
    history_rows,
)
from services.export_service import (
    serialize_json,
    parse_json,
    serialize_csv,
    serialize_history_csv,
    export_filename,
    build_export,
    build_history_export,
)
from services.production_service import ProductionService, get_production_service

__all__ = [
    # Metrics
    "compute_progress",
    "clamp_progress",
    "classify_progress",
    "classify_alerts",
    "record_metrics",

    # Pallets
    "pallet_status",

    # Schedule
    "parse_shift",
    "is_scheduled",
    "iter_schedule",
    "scheduled_shifts",

    # History
    "FilteredHistory",
    "HistoryLog",
    "filter_history",
    "filter_options",
    "history_rows",

    # Export
    "serialize_json",
    "parse_json",
    "serialize_csv",
    "serialize_history_csv",
    "export_filename",
    "build_export",
    "build_history_export",

    # Data source
    "ProductionService",
    "get_production_service",
]
