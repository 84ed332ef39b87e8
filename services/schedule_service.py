"""
Shift schedule lookups.

The configured shift order drives iteration; a record's own schedule
is only ever read through it.
"""

from typing import Iterator, Union
import structlog

from config.engine import EngineConfig
from exceptions import UnknownShiftError
from models.production import ProductionRecord
from models.shift import Shift

logger = structlog.get_logger(__name__)


def parse_shift(value: Union[Shift, str], config: EngineConfig) -> Shift:
    """
    Resolve a shift symbol against the configured shift set.

    Raises:
        UnknownShiftError: If the symbol is not one of config.shifts
    """
    code = value.value if isinstance(value, Shift) else value
    for shift in config.shifts:
        if shift.value == code:
            return shift

    logger.warning("unknown_shift", shift=code, valid=config.shift_codes)
    raise UnknownShiftError(code, config.shift_codes)


def is_scheduled(
    record: ProductionRecord,
    shift: Union[Shift, str],
    config: EngineConfig
) -> bool:
    """Whether the record runs on the given shift."""
    return record.shifts.get(parse_shift(shift, config))


def iter_schedule(
    record: ProductionRecord,
    config: EngineConfig
) -> Iterator[tuple[Shift, bool]]:
    """(shift, scheduled) pairs in configured order."""
    for shift in config.shifts:
        yield shift, record.shifts.get(shift)


def scheduled_shifts(record: ProductionRecord, config: EngineConfig) -> list[Shift]:
    return [shift for shift, active in iter_schedule(record, config) if active]
