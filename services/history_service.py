"""
History filter engine.

Filters archived shift results by exact match on date, shift, product
and weight. Filtering is lazy and pure: the source is walked again on
every iteration and never reordered or modified.
"""

from typing import Iterable, Iterator, Mapping, Optional, Union
import structlog
from pydantic import ValidationError as PydanticValidationError

from config.engine import EngineConfig
from exceptions import InvalidCriteriaError
from models.history import (
    HistoryEntry,
    HistoryFilterCriteria,
    HistoryRow,
    FilterOptions,
)
from models.production import ProductionRecord
from services.metrics_service import compute_progress, classify_progress

logger = structlog.get_logger(__name__)

CriteriaInput = Union[HistoryFilterCriteria, Mapping[str, object], None]


def parse_criteria(
    raw: CriteriaInput,
    config: Optional[EngineConfig] = None
) -> HistoryFilterCriteria:
    """
    Build filter criteria from a model, a mapping (e.g. query params) or None.

    With a config, a shift criterion must be one of config.shifts.

    Raises:
        InvalidCriteriaError: If a value cannot be converted
            (non-numeric weight, unknown shift, malformed date)
    """
    if raw is None:
        criteria = HistoryFilterCriteria()
    elif isinstance(raw, HistoryFilterCriteria):
        criteria = raw
    else:
        try:
            criteria = HistoryFilterCriteria.model_validate(dict(raw))
        except PydanticValidationError as e:
            errors = [
                {
                    "field": ".".join(str(part) for part in err["loc"]),
                    "message": err["msg"],
                    "provided": err.get("input"),
                }
                for err in e.errors()
            ]
            logger.warning("history_criteria_rejected", errors=errors)
            raise InvalidCriteriaError(errors)

    outside_config = (
        config is not None
        and criteria.shift is not None
        and criteria.shift not in config.shifts
    )
    if outside_config:
        errors = [{
            "field": "shift",
            "message": f"Shift must be one of {', '.join(config.shift_codes)}",
            "provided": criteria.shift.value,
        }]
        logger.warning("history_criteria_rejected", errors=errors)
        raise InvalidCriteriaError(errors)

    return criteria


def matches(entry: HistoryEntry, criteria: HistoryFilterCriteria) -> bool:
    """True if every set criterion equals the entry's field."""
    if criteria.date is not None and entry.date != criteria.date:
        return False
    if criteria.shift is not None and entry.shift != criteria.shift:
        return False
    if criteria.product is not None and entry.product != criteria.product:
        return False
    if criteria.weight is not None and entry.weight != criteria.weight:
        return False
    return True


class FilteredHistory:
    """
    Lazy, restartable view of history entries matching a criteria set.

    Each iteration walks the source again, so iterating twice over a
    re-iterable source gives the same sequence.
    """

    def __init__(self, entries: Iterable[HistoryEntry], criteria: HistoryFilterCriteria):
        self.entries = entries
        self.criteria = criteria

    def __iter__(self) -> Iterator[HistoryEntry]:
        for entry in self.entries:
            if matches(entry, self.criteria):
                yield entry

    def to_list(self) -> list[HistoryEntry]:
        return list(self)


def filter_history(
    entries: Iterable[HistoryEntry],
    criteria: CriteriaInput = None,
    config: Optional[EngineConfig] = None
) -> FilteredHistory:
    """
    Filter history entries, keeping archival order.

    Args:
        entries: History entries, oldest-appended first
        criteria: HistoryFilterCriteria, raw mapping, or None for no filter
        config: Engine configuration; when given, restricts the shift criterion

    Returns:
        FilteredHistory (lazy; iterate to evaluate)

    Raises:
        InvalidCriteriaError: If raw criteria cannot be converted
    """
    parsed = parse_criteria(criteria, config)
    logger.debug(
        "filtering_history",
        criteria=parsed.model_dump(mode="json", exclude_none=True)
    )
    return FilteredHistory(entries, parsed)


def history_row(entry: HistoryEntry) -> HistoryRow:
    """History entry plus its compliance percent."""
    progress = compute_progress(entry.produced, entry.target)
    return HistoryRow(
        date=entry.date,
        shift=entry.shift,
        product=entry.product,
        weight=entry.weight,
        target=entry.target,
        produced=entry.produced,
        progress=progress,
        status=classify_progress(progress),
    )


def history_rows(entries: Iterable[HistoryEntry]) -> Iterator[HistoryRow]:
    for entry in entries:
        yield history_row(entry)


def filter_options(
    records: Iterable[ProductionRecord],
    config: EngineConfig
) -> FilterOptions:
    """
    Choices for the history filter form.

    Products and weights come from the live records, de-duplicated in
    first-seen order.
    """
    products: list[str] = []
    weights: list[int] = []

    for record in records:
        if record.product not in products:
            products.append(record.product)
        if record.weight not in weights:
            weights.append(record.weight)

    return FilterOptions(
        shifts=list(config.shifts),
        products=products,
        weights=weights,
    )


class HistoryLog:
    """
    Append-only store of history entries.

    Entries are frozen models; the log offers no update or delete.
    """

    def __init__(self, entries: Optional[Iterable[HistoryEntry]] = None):
        self._entries: list[HistoryEntry] = []
        if entries is not None:
            self.extend(entries)

    def append(self, entry: HistoryEntry) -> None:
        self._entries.append(entry)

    def extend(self, entries: Iterable[HistoryEntry]) -> None:
        for entry in entries:
            self.append(entry)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(tuple(self._entries))

    def __len__(self) -> int:
        return len(self._entries)
