"""
Export API routes: download production and history files.
"""

from datetime import date as date_type
from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import Response
import structlog

from models.export import ExportFormat, ExportPayload
from routes.common import handle_error, history_criteria
from services.production_service import get_production_service

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/export", tags=["Export"])


def file_response(payload: ExportPayload) -> Response:
    """Attachment response for an export payload."""
    return Response(
        content=payload.body,
        media_type=payload.media_type,
        headers={"Content-Disposition": f'attachment; filename="{payload.filename}"'},
    )


@router.get("/production")
async def export_production(
    fmt: ExportFormat = Query(ExportFormat.JSON, alias="format", description="json or csv"),
    date: Optional[date_type] = Query(None, description="Export date (default: today)"),
    shift: Optional[str] = Query(None, description="Current shift (default: first configured)"),
    escape: bool = Query(False, description="Quote CSV fields that need it"),
):
    """
    Download the live production records.

    Filename: production_data_<date>_shift_<shift>.<format>
    """
    try:
        service = get_production_service()
        payload = service.export_production(
            fmt,
            date or date_type.today(),
            shift or service.config.shifts[0],
            escape=escape,
        )
        return file_response(payload)

    except Exception as e:
        return handle_error(e)


@router.get("/history")
async def export_history(
    date: Optional[date_type] = Query(None, description="Export date (default: today)"),
    shift: Optional[str] = Query(None, description="Current shift (default: first configured)"),
    filter_date: Optional[str] = Query(None, description="History date filter"),
    filter_shift: Optional[str] = Query(None, description="History shift filter"),
    product: Optional[str] = Query(None, description="History product filter"),
    weight: Optional[str] = Query(None, description="History weight filter"),
    escape: bool = Query(False, description="Quote CSV fields that need it"),
):
    """
    Download filtered history as CSV.

    Filename: production_history_<date>_shift_<shift>.csv
    """
    try:
        service = get_production_service()
        payload = service.export_history(
            date or date_type.today(),
            shift or service.config.shifts[0],
            criteria=history_criteria(filter_date, filter_shift, product, weight),
            escape=escape,
        )
        return file_response(payload)

    except Exception as e:
        return handle_error(e)
