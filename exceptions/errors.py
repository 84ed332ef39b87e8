"""
Custom exception classes for the application.
"""

from typing import Optional, Any
from datetime import datetime, timezone


class AppError(Exception):
    """
    Base exception for all application errors.

    All custom exceptions inherit from this.

    Attributes:
        code: Error code (e.g., "UNKNOWN_SHIFT")
        message: Human-readable message
        status_code: HTTP status code
        details: Additional context
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to API response format."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
                "timestamp": self.timestamp
            }
        }


class NotFoundError(AppError):
    """Resource not found (404)."""

    def __init__(
        self,
        resource: str,
        identifier: str,
        code: Optional[str] = None
    ):
        super().__init__(
            code=code or f"{resource.upper()}_NOT_FOUND",
            message=f"{resource} not found",
            status_code=404,
            details={"id": identifier}
        )


class ValidationError(AppError):
    """Validation failed (422)."""

    def __init__(
        self,
        message: str,
        code: str = "VALIDATION_ERROR",
        details: Optional[dict] = None
    ):
        super().__init__(
            code=code,
            message=message,
            status_code=422,
            details=details
        )


class ConflictError(AppError):
    """Conflict with existing resource (409)."""

    def __init__(
        self,
        message: str,
        code: str = "CONFLICT",
        details: Optional[dict] = None
    ):
        super().__init__(
            code=code,
            message=message,
            status_code=409,
            details=details
        )


class DuplicateError(ConflictError):
    """Duplicate resource (409)."""

    def __init__(
        self,
        resource: str,
        field: str,
        value: str
    ):
        super().__init__(
            code=f"{resource.upper()}_{field.upper()}_EXISTS",
            message=f"{resource} with this {field} already exists",
            details={field: value}
        )


# ===================
# ENGINE ERRORS
# ===================

class DivisionByZeroError(ValidationError):
    """Progress requested against a non-positive target."""

    def __init__(self, produced: int, target: int):
        super().__init__(
            code="PROGRESS_DIVISION_BY_ZERO",
            message=f"Cannot compute progress with target {target}",
            details={"produced": produced, "target": target}
        )


class UnknownShiftError(ValidationError):
    """Shift symbol outside the configured shift set."""

    def __init__(self, shift: Any, valid: list[str]):
        super().__init__(
            code="UNKNOWN_SHIFT",
            message=f"Unknown shift: {shift}",
            details={"provided": str(shift), "valid": valid}
        )


class InvalidCriteriaError(ValidationError):
    """History filter criteria could not be converted."""

    def __init__(self, errors: list[dict]):
        super().__init__(
            code="INVALID_CRITERIA",
            message=f"Invalid history filter: {len(errors)} field(s) rejected",
            details={"errors": errors}
        )


# ===================
# PRODUCTION RECORD ERRORS
# ===================

class ProductionRecordNotFoundError(NotFoundError):
    """Production record not found."""

    def __init__(self, record_id: int):
        super().__init__(
            resource="Production record",
            identifier=str(record_id),
            code="PRODUCTION_RECORD_NOT_FOUND"
        )


class ProductionRecordIdExistsError(DuplicateError):
    """Two live records share an id."""

    def __init__(self, record_id: int):
        super().__init__(
            resource="Production record",
            field="id",
            value=str(record_id)
        )
