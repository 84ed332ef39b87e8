"""
Custom exceptions module.
"""

from exceptions.errors import (
    # Base exceptions
    AppError,
    NotFoundError,
    ValidationError,
    ConflictError,
    DuplicateError,

    # Engine
    DivisionByZeroError,
    UnknownShiftError,
    InvalidCriteriaError,

    # Production records
    ProductionRecordNotFoundError,
    ProductionRecordIdExistsError,
)

__all__ = [
    # Base
    "AppError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "DuplicateError",

    # Engine
    "DivisionByZeroError",
    "UnknownShiftError",
    "InvalidCriteriaError",

    # Production records
    "ProductionRecordNotFoundError",
    "ProductionRecordIdExistsError",
]
