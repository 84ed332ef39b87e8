"""
History API routes.
"""

from typing import Optional

from fastapi import APIRouter, Query
import structlog

from models.history import HistoryListResponse, FilterOptions
from routes.common import handle_error, history_criteria
from services.production_service import get_production_service

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/history", tags=["History"])


@router.get("", response_model=HistoryListResponse)
async def list_history(
    date: Optional[str] = Query(None, description="YYYY-MM-DD"),
    shift: Optional[str] = Query(None, description="Shift letter"),
    product: Optional[str] = Query(None, description="Exact product name"),
    weight: Optional[str] = Query(None, description="Grams per unit"),
):
    """
    List archived shift results.

    Empty parameters match everything. Results keep archival order.
    """
    try:
        service = get_production_service()
        rows = service.get_history(history_criteria(date, shift, product, weight))

        return HistoryListResponse(data=rows, total=len(rows))

    except Exception as e:
        return handle_error(e)


@router.get("/options", response_model=FilterOptions)
async def get_filter_options():
    """Shifts, products and weights offered by the history filter."""
    try:
        service = get_production_service()
        return service.get_filter_options()

    except Exception as e:
        return handle_error(e)
