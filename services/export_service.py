"""
Export service: JSON and CSV files of production and history data.

Serializers are pure: the same records always give the same text. The
export date and shift only go into the filename.
"""

import csv
from datetime import date
from io import StringIO
from typing import Iterable, Sequence, Union
import structlog
from pydantic import TypeAdapter

from config.engine import EngineConfig
from models.export import ExportFormat, ExportPayload, MEDIA_TYPES
from models.history import HistoryEntry
from models.production import ProductionRecord
from models.shift import Shift
from services.metrics_service import compute_progress
from services.schedule_service import parse_shift

logger = structlog.get_logger(__name__)

PRODUCTION_CSV_HEADER = ["id", "product", "weight", "target", "produced", "progress"]
HISTORY_CSV_HEADER = ["date", "shift", "product", "weight", "target", "produced", "progress"]

_records_adapter = TypeAdapter(list[ProductionRecord])


# ===================
# JSON
# ===================

def serialize_json(records: Sequence[ProductionRecord]) -> str:
    """
    Compact JSON array of records with camelCase keys.

    Non-ASCII product names are written as-is (UTF-8), not escaped.
    """
    return _records_adapter.dump_json(list(records), by_alias=True).decode("utf-8")


def parse_json(text: Union[str, bytes]) -> list[ProductionRecord]:
    """Inverse of serialize_json."""
    return _records_adapter.validate_json(text)


# ===================
# CSV
# ===================

def _csv_text(header: list[str], rows: list[list], escape: bool) -> str:
    """
    Header line, then rows joined by newlines (no trailing newline).

    Without escape, fields are joined verbatim: a comma inside a field
    shifts every column after it.
    """
    if not escape:
        lines = [",".join(str(field) for field in row) for row in rows]
        return ",".join(header) + "\n" + "\n".join(lines)

    buffer = StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(header)
    writer.writerows(rows)
    text = buffer.getvalue()
    if rows:
        text = text[:-1]
    return text


def _warn_unescaped(kind: str, products: Iterable[str]) -> None:
    broken = [product for product in products if "," in product]
    if broken:
        logger.warning("csv_unescaped_comma", kind=kind, products=broken)


def serialize_csv(records: Sequence[ProductionRecord], escape: bool = False) -> str:
    """
    CSV of live records: id,product,weight,target,produced,progress.

    Args:
        records: Records in output order
        escape: Quote fields that need it; off by default for
            compatibility with existing consumers of the export

    Returns:
        CSV text
    """
    if not escape:
        _warn_unescaped("production", (record.product for record in records))

    rows = [
        [
            record.id,
            record.product,
            record.weight,
            record.target,
            record.produced,
            compute_progress(record.produced, record.target),
        ]
        for record in records
    ]
    return _csv_text(PRODUCTION_CSV_HEADER, rows, escape)


def serialize_history_csv(entries: Iterable[HistoryEntry], escape: bool = False) -> str:
    """CSV of history entries: date,shift,product,weight,target,produced,progress."""
    entries = list(entries)
    if not escape:
        _warn_unescaped("history", (entry.product for entry in entries))

    rows = [
        [
            entry.date.isoformat(),
            entry.shift.value,
            entry.product,
            entry.weight,
            entry.target,
            entry.produced,
            compute_progress(entry.produced, entry.target),
        ]
        for entry in entries
    ]
    return _csv_text(HISTORY_CSV_HEADER, rows, escape)


# ===================
# FILES
# ===================

def export_filename(
    current_date: Union[date, str],
    current_shift: Union[Shift, str],
    fmt: ExportFormat,
    prefix: str = "production_data"
) -> str:
    """
    'production_data_2025-03-08_shift_A.csv'
    """
    date_part = current_date.isoformat() if isinstance(current_date, date) else current_date
    shift_part = current_shift.value if isinstance(current_shift, Shift) else current_shift
    return f"{prefix}_{date_part}_shift_{shift_part}.{fmt.value}"


def build_export(
    records: Sequence[ProductionRecord],
    fmt: ExportFormat,
    current_date: Union[date, str],
    current_shift: Union[Shift, str],
    config: EngineConfig,
    escape: bool = False
) -> ExportPayload:
    """
    Serialize live records into a named file payload.

    Raises:
        UnknownShiftError: If current_shift is not a configured shift
    """
    shift = parse_shift(current_shift, config)

    if fmt == ExportFormat.JSON:
        content = serialize_json(records)
    else:
        content = serialize_csv(records, escape=escape)

    payload = ExportPayload(
        filename=export_filename(current_date, shift, fmt),
        media_type=MEDIA_TYPES[fmt],
        content=content,
        row_count=len(records),
    )

    logger.info(
        "export_built",
        format=fmt.value,
        filename=payload.filename,
        rows=payload.row_count
    )

    return payload


def build_history_export(
    entries: Iterable[HistoryEntry],
    current_date: Union[date, str],
    current_shift: Union[Shift, str],
    config: EngineConfig,
    escape: bool = False
) -> ExportPayload:
    """Serialize (already filtered) history into a CSV file payload."""
    shift = parse_shift(current_shift, config)
    entries = list(entries)

    payload = ExportPayload(
        filename=export_filename(
            current_date, shift, ExportFormat.CSV, prefix="production_history"
        ),
        media_type=MEDIA_TYPES[ExportFormat.CSV],
        content=serialize_history_csv(entries, escape=escape),
        row_count=len(entries),
    )

    logger.info(
        "history_export_built",
        filename=payload.filename,
        rows=payload.row_count
    )

    return payload
