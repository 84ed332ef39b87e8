"""
Pydantic models for validation and serialization.
"""

from models.base import (
    BaseSchema,
    CamelSchema,
)
from models.shift import (
    Shift,
    ShiftSchedule,
    DEFAULT_SHIFTS,
)
from models.production import (
    ProgressStatus,
    Pallets,
    ProductionRecord,
    AlertType,
    AlertSeverity,
    Alert,
    PalletStatus,
    RecordMetrics,
    ProductionCard,
    ProductionListResponse,
)
from models.history import (
    HistoryEntry,
    HistoryFilterCriteria,
    HistoryRow,
    HistoryListResponse,
    FilterOptions,
)
from models.export import (
    ExportFormat,
    ExportPayload,
    MEDIA_TYPES,
)

__all__ = [
    # Base
    "BaseSchema",
    "CamelSchema",

    # Shifts
    "Shift",
    "ShiftSchedule",
    "DEFAULT_SHIFTS",

    # Production
    "ProgressStatus",
    "Pallets",
    "ProductionRecord",
    "AlertType",
    "AlertSeverity",
    "Alert",
    "PalletStatus",
    "RecordMetrics",
    "ProductionCard",
    "ProductionListResponse",

    # History
    "HistoryEntry",
    "HistoryFilterCriteria",
    "HistoryRow",
    "HistoryListResponse",
    "FilterOptions",

    # Export
    "ExportFormat",
    "ExportPayload",
    "MEDIA_TYPES",
]
