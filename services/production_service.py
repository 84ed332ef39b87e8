"""
Production service: read-only access to live records and history.

Loads records and history from the seed data source, validates them
once, and serves the dashboard, history and export views. There are no
write operations: the monitor never changes production state.
"""

from datetime import date
from typing import Iterable, Mapping, Optional, Union
import structlog

from config import EngineConfig, get_engine_config
from data.seed import PRODUCTION_RECORDS, HISTORY_ENTRIES
from exceptions import ProductionRecordNotFoundError, ProductionRecordIdExistsError
from models.export import ExportFormat, ExportPayload
from models.history import HistoryEntry, HistoryFilterCriteria, HistoryRow, FilterOptions
from models.production import ProductionRecord, ProductionCard
from models.shift import Shift
from services.export_service import build_export, build_history_export
from services.history_service import (
    HistoryLog,
    filter_history,
    filter_options,
    history_rows,
)
from services.metrics_service import record_metrics
from services.schedule_service import is_scheduled

logger = structlog.get_logger(__name__)

Criteria = Union[HistoryFilterCriteria, Mapping[str, object], None]


def load_records(raw_records: Iterable[Mapping]) -> list[ProductionRecord]:
    """
    Validate raw record dicts.

    Raises:
        pydantic.ValidationError: If a record breaks the model invariants
        ProductionRecordIdExistsError: If two records share an id
    """
    records: list[ProductionRecord] = []
    seen: set[int] = set()

    for raw in raw_records:
        record = ProductionRecord.model_validate(raw)
        if record.id in seen:
            logger.error("duplicate_record_id", record_id=record.id)
            raise ProductionRecordIdExistsError(record.id)
        seen.add(record.id)
        records.append(record)

    return records


class ProductionService:
    """
    Read-only production data.

    Holds the live records and the append-only history log, and runs
    them through the engine with one EngineConfig.
    """

    def __init__(
        self,
        records: Optional[Iterable[Mapping]] = None,
        history: Optional[Iterable[Mapping]] = None,
        config: Optional[EngineConfig] = None
    ):
        self.config = config or get_engine_config()
        self.records = load_records(PRODUCTION_RECORDS if records is None else records)
        self.history = HistoryLog(
            HistoryEntry.model_validate(raw)
            for raw in (HISTORY_ENTRIES if history is None else history)
        )

        logger.info(
            "production_data_loaded",
            records=len(self.records),
            history=len(self.history)
        )

    # ===================
    # LIVE RECORDS
    # ===================

    def get_all(self) -> list[ProductionRecord]:
        return list(self.records)

    def get_by_id(self, record_id: int) -> ProductionRecord:
        """
        Get a single record by ID.

        Raises:
            ProductionRecordNotFoundError: If no live record has this id
        """
        for record in self.records:
            if record.id == record_id:
                return record
        raise ProductionRecordNotFoundError(record_id)

    def get_card(self, record_id: int) -> ProductionCard:
        record = self.get_by_id(record_id)
        return ProductionCard(record=record, metrics=record_metrics(record, self.config))

    def get_cards(self) -> list[ProductionCard]:
        """Every live record with its derived metrics, in source order."""
        return [
            ProductionCard(record=record, metrics=record_metrics(record, self.config))
            for record in self.records
        ]

    def is_scheduled(self, record_id: int, shift: Union[Shift, str]) -> bool:
        return is_scheduled(self.get_by_id(record_id), shift, self.config)

    # ===================
    # HISTORY
    # ===================

    def get_history(self, criteria: Criteria = None) -> list[HistoryRow]:
        """
        Filtered history rows in archival order.

        Raises:
            InvalidCriteriaError: If criteria cannot be converted
        """
        rows = list(history_rows(filter_history(self.history, criteria, self.config)))
        logger.info("history_retrieved", count=len(rows), total=len(self.history))
        return rows

    def get_filter_options(self) -> FilterOptions:
        return filter_options(self.records, self.config)

    # ===================
    # EXPORT
    # ===================

    def export_production(
        self,
        fmt: ExportFormat,
        current_date: Union[date, str],
        current_shift: Union[Shift, str],
        escape: bool = False
    ) -> ExportPayload:
        return build_export(
            self.records,
            fmt,
            current_date,
            current_shift,
            self.config,
            escape=escape,
        )

    def export_history(
        self,
        current_date: Union[date, str],
        current_shift: Union[Shift, str],
        criteria: Criteria = None,
        escape: bool = False
    ) -> ExportPayload:
        return build_history_export(
            filter_history(self.history, criteria, self.config),
            current_date,
            current_shift,
            self.config,
            escape=escape,
        )


# Singleton instance
_production_service: Optional[ProductionService] = None


def get_production_service() -> ProductionService:
    """Get or create ProductionService instance."""
    global _production_service
    if _production_service is None:
        _production_service = ProductionService()
    return _production_service
