"""
Shared route helpers.
"""

from typing import Optional

from fastapi.responses import JSONResponse
import structlog

from exceptions import AppError

logger = structlog.get_logger(__name__)


def handle_error(e: Exception) -> JSONResponse:
    """Convert exception to JSON response."""
    if isinstance(e, AppError):
        return JSONResponse(
            status_code=e.status_code,
            content=e.to_dict()
        )
    logger.error("unexpected_error", error=str(e), type=type(e).__name__)
    return JSONResponse(
        status_code=500,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred"
            }
        }
    )


def history_criteria(
    date: Optional[str],
    shift: Optional[str],
    product: Optional[str],
    weight: Optional[str]
) -> dict:
    """Raw history criteria from query parameters; conversion happens in the engine."""
    return {"date": date, "shift": shift, "product": product, "weight": weight}
