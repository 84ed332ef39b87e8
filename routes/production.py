"""
Production API routes.

Read-only view of live product runs with derived progress, alerts and
pallet accounting.
"""

from fastapi import APIRouter
import structlog

from models.production import ProductionCard, ProductionListResponse
from routes.common import handle_error
from services.production_service import get_production_service

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/production", tags=["Production"])


@router.get("", response_model=ProductionListResponse)
async def list_production():
    """
    List live production records with their metrics.

    Records are returned in source order.
    """
    try:
        service = get_production_service()
        cards = service.get_cards()

        return ProductionListResponse(
            data=cards,
            total=len(cards),
            alert_count=sum(len(card.metrics.alerts) for card in cards),
        )

    except Exception as e:
        return handle_error(e)


@router.get("/{record_id}", response_model=ProductionCard)
async def get_production_record(record_id: int):
    """
    Get a single production record with its metrics.

    Args:
        record_id: Record id
    """
    try:
        service = get_production_service()
        return service.get_card(record_id)

    except Exception as e:
        return handle_error(e)


@router.get("/{record_id}/schedule/{shift}")
async def get_shift_schedule(record_id: int, shift: str):
    """
    Check whether a record is scheduled on a shift.

    Args:
        record_id: Record id
        shift: Shift letter (A-F)
    """
    try:
        service = get_production_service()
        scheduled = service.is_scheduled(record_id, shift)

        return {"recordId": record_id, "shift": shift, "scheduled": scheduled}

    except Exception as e:
        return handle_error(e)
